"""
Game Exceptions

Errors raised by the game core.
"""


class WordGameError(Exception):
    """Base class for all game core errors."""


class InvalidGuess(WordGameError, ValueError):
    """A guess has the wrong length or contains characters outside A-Z.

    Recoverable: the caller is expected to re-prompt the player.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UnknownLetterKey(WordGameError, LookupError):
    """A keyboard key has no derivable default state."""


class InvalidTransition(WordGameError, RuntimeError):
    """A letter state change that the upgrade rules never allow."""
