"""
Services Package

Contains all business logic and service classes.
"""

from .game_round import GameRound
from .game_service import GameService, get_game_service, init_game_service
from .word_source import WordSource, get_word_statistics, validate_word_list_integrity

__all__ = [
    'GameRound',
    'GameService', 'get_game_service', 'init_game_service',
    'WordSource', 'get_word_statistics', 'validate_word_list_integrity'
]
