"""
Game Rules Module

Fixed rules of the word-guessing game. These are not read from the
environment: a round is always five letters and six turns.
"""

from typing import Final, Tuple

WORD_LENGTH: Final[int] = 5
"""Number of letters in the secret word and in every guess."""

MAX_TURNS: Final[int] = 6
"""
Maximum number of recorded guesses per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

LEGAL_LETTERS: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Feedback symbols sent to the rendering layer
RIGHT_SYMBOL: Final[str] = "*"
MISPOSITIONED_SYMBOL: Final[str] = "+"
UNUSED_SYMBOL: Final[str] = "."

WINNING_RESPONSES: Final[Tuple[str, ...]] = (
    "Genius",
    "Magnificent",
    "Impressive",
    "Splendid",
    "Great",
    "Phew",
)
