"""
Game Data Models

Contains the game state machine and the serializable game snapshot.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import (
    LEGAL_LETTERS,
    MAX_TURNS,
    MISPOSITIONED_SYMBOL,
    RIGHT_SYMBOL,
    UNUSED_SYMBOL,
    WINNING_RESPONSES,
    WORD_LENGTH,
)
from .exceptions import InvalidGuess


class Game:
    """
    One round of the word-guessing game.

    Owns the secret word and the ordered list of distinct guesses made so
    far. The only mutating operation is score(); everything else is a
    pure read.
    """

    def __init__(self, secret_word: str):
        if len(secret_word) != WORD_LENGTH or not all(c in LEGAL_LETTERS for c in secret_word):
            raise ValueError(f"Secret word must be {WORD_LENGTH} upper-case letters, got '{secret_word}'")
        self._secret_word = secret_word
        self._guesses: List[str] = []

    @property
    def secret_word(self) -> str:
        return self._secret_word

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._guesses)

    @property
    def num_guesses(self) -> int:
        return len(self._guesses)

    @property
    def word_found(self) -> bool:
        return self._secret_word in self._guesses

    @property
    def is_over(self) -> bool:
        return self.word_found or self.num_guesses >= MAX_TURNS

    @property
    def turns_remaining(self) -> int:
        return MAX_TURNS - self.num_guesses

    def validate_guess(self, guess: str) -> None:
        """
        Checks the shape of a guess without touching game state.

        Raises:
            InvalidGuess: If the guess length differs from the secret word or
                it contains characters that are not upper-case English letters
        """
        if len(guess) != len(self._secret_word):
            raise InvalidGuess(f"Your guess was not {WORD_LENGTH} letters long.")
        # str.isupper() accepts letters from other alphabets
        if not all(c in LEGAL_LETTERS for c in guess):
            raise InvalidGuess("The guess must consist only of upper-case English letters.")

    def score(self, guess: str) -> str:
        """
        Evaluates how closely a guess matches the secret word.

        Returns a feedback string the same length as the guess. Every position
        where the guess matches the secret word gets '*'. A letter that occurs
        at a different position of the secret word gets '+', but only as many
        times as that letter is left unmatched in the secret word. Anything
        else gets '.'.

        A guess identical to an earlier one is scored again but not recorded
        a second time.

        Raises:
            InvalidGuess: If the game is already over or the guess fails
                validate_guess(); nothing is recorded
        """
        if self.is_over:
            raise InvalidGuess("The game is already over.")
        self.validate_guess(guess)
        if guess not in self._guesses:
            self._guesses.append(guess)

        # Letters of the secret word not already matched in place
        letter_pool = Counter(
            secret for secret, guessed in zip(self._secret_word, guess) if secret != guessed
        )

        feedback = []
        for secret, guessed in zip(self._secret_word, guess):
            if guessed == secret:
                feedback.append(RIGHT_SYMBOL)
            elif letter_pool[guessed] > 0:
                letter_pool[guessed] -= 1
                feedback.append(MISPOSITIONED_SYMBOL)
            else:
                feedback.append(UNUSED_SYMBOL)
        return ''.join(feedback)

    @staticmethod
    def winning_response(num_guesses: int) -> str:
        """Congratulation for a win in num_guesses turns, clamped to the last rung."""
        if 1 <= num_guesses <= MAX_TURNS:
            return WINNING_RESPONSES[num_guesses - 1]
        return WINNING_RESPONSES[MAX_TURNS - 1]

    def __repr__(self):
        return f"Game(num_guesses={self.num_guesses}, is_over={self.is_over})"


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    num_guesses: int
    max_turns: int
    game_over: bool
    won: bool
    guesses: List[str]
    feedback: List[str]  # One symbol string per recorded guess
    letter_states: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
    message: Optional[str] = None  # Winning response or the revealed word
