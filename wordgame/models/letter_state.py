"""
Keyboard Letter State Models

Tracks the best feedback seen for each keyboard key over a whole game.
"""

from enum import Enum
from typing import Dict

from ..config.game_settings import MISPOSITIONED_SYMBOL, RIGHT_SYMBOL, UNUSED_SYMBOL
from .exceptions import InvalidTransition, UnknownLetterKey


class LetterState(Enum):
    """Keyboard key state, ordered from least to most informative."""
    SPECIAL = "SPECIAL"  # Control keys such as ENTER and backspace
    UNKNOWN = "UNKNOWN"
    UNUSED = "UNUSED"
    MISPOSITIONED = "MISPOSITIONED"
    RIGHT = "RIGHT"
    INVISIBLE = "INVISIBLE"  # Numeric spacer keys


# States that only ever come from the key identity
FIXED_STATES = (LetterState.SPECIAL, LetterState.INVISIBLE)

_SYMBOL_STATES = {
    RIGHT_SYMBOL: LetterState.RIGHT,
    MISPOSITIONED_SYMBOL: LetterState.MISPOSITIONED,
    UNUSED_SYMBOL: LetterState.UNUSED,
}


def classify_default(key: str) -> LetterState:
    """
    Returns the state of a key that has never been observed.

    Digits are spacers and stay invisible, multi-character labels are
    control keys, and single letters start out unknown.

    Raises:
        UnknownLetterKey: If the key is empty or not a string
    """
    if not isinstance(key, str) or not key:
        raise UnknownLetterKey(f"No default state for key {key!r}")
    if key.isdigit():
        return LetterState.INVISIBLE
    if len(key) > 1:
        return LetterState.SPECIAL
    return LetterState.UNKNOWN


def to_letter_state(symbol: str) -> LetterState:
    """Maps one feedback symbol ('*', '+' or '.') to its letter state."""
    try:
        return _SYMBOL_STATES[symbol]
    except KeyError:
        raise ValueError(f"Unexpected feedback symbol: {symbol!r}") from None


class LetterStateTracker:
    """
    Aggregates letter states across all guesses of one game.

    States only move up: UNKNOWN can become UNUSED or MISPOSITIONED, and
    anything can become RIGHT. UNUSED and MISPOSITIONED never replace each
    other and RIGHT never regresses.

    Not thread safe; the owner serializes calls.
    """

    def __init__(self):
        self._states: Dict[str, LetterState] = {}

    def state(self, key: str) -> LetterState:
        """Current state of a key, without creating an entry for it."""
        if key in self._states:
            return self._states[key]
        return classify_default(key)

    def observe(self, key: str, new_state: LetterState) -> bool:
        """
        Applies a newly observed state to a key.

        Returns:
            bool: True if the stored state changed, False otherwise

        Raises:
            InvalidTransition: If new_state is not RIGHT, MISPOSITIONED or UNUSED,
                or the key has a fixed state (even for RIGHT: control and spacer
                keys keep their classification)
        """
        if new_state not in (LetterState.RIGHT, LetterState.MISPOSITIONED, LetterState.UNUSED):
            raise InvalidTransition(f"Unexpected state: {new_state}")

        old_state = self.state(key)
        if new_state == old_state:
            return False
        if old_state in FIXED_STATES:
            raise InvalidTransition(f"Key {key!r} is fixed at {old_state}")

        if new_state == LetterState.RIGHT or old_state == LetterState.UNKNOWN:
            self._states[key] = new_state
            return True
        return False

    def observe_feedback(self, guess: str, feedback: str) -> Dict[str, LetterState]:
        """
        Observes every letter of a scored guess.

        Returns:
            Dict of keys whose state changed, mapped to their new state
        """
        changed = {}
        for letter, symbol in zip(guess, feedback):
            if self.observe(letter, to_letter_state(symbol)):
                changed[letter] = self._states[letter]
        return changed

    def snapshot(self) -> Dict[str, str]:
        """Observed keys mapped to their state value, for JSON responses."""
        return {key: state.value for key, state in sorted(self._states.items())}

    def reset(self) -> None:
        """Forgets every observation; called at the start of a round."""
        self._states.clear()

    def __len__(self):
        return len(self._states)
