"""
Data Models Package

Contains the game core: the game state machine, keyboard letter states and
their errors.
"""

from .exceptions import InvalidGuess, InvalidTransition, UnknownLetterKey, WordGameError
from .game import Game, GameState
from .letter_state import LetterState, LetterStateTracker, classify_default, to_letter_state

__all__ = [
    'Game', 'GameState',
    'LetterState', 'LetterStateTracker', 'classify_default', 'to_letter_state',
    'WordGameError', 'InvalidGuess', 'InvalidTransition', 'UnknownLetterKey'
]
