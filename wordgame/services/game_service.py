"""
Game Service

Manages single-player game sessions on top of the game core.
"""

import logging
import threading
import uuid
from typing import Dict, Optional, Tuple

from flask import current_app

from ..models.exceptions import InvalidGuess
from ..models.game import Game, GameState
from ..config.game_settings import MAX_TURNS
from .game_round import GameRound
from .word_source import WordSource

logger = logging.getLogger(__name__)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secure answer storage
    - Guess validation against the word list
    - Game state snapshots without exposing answers to clients

    Rounds are not thread safe on their own, so every read and write of a
    round happens under the service lock.
    """

    def __init__(self, word_source: WordSource):
        self.word_source = word_source
        self.games: Dict[str, GameRound] = {}  # Store active rounds by game_id
        self._lock = threading.RLock()

    def create_new_game(self, secret_word: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            secret_word: Word to play; a random secret word when omitted

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        word = secret_word.upper() if secret_word else self.word_source.pick_secret_word()
        with self._lock:
            self.games[game_id] = GameRound(Game(word))
        logger.debug("Created game %s", game_id)
        return game_id

    def get_round(self, game_id: str) -> Optional[GameRound]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        with self._lock:
            game_round = self.games.get(game_id)
            if game_round is None:
                return None

            game = game_round.game
            return GameState(
                game_id=game_id,
                num_guesses=game.num_guesses,
                max_turns=MAX_TURNS,
                game_over=game.is_over,
                won=game.word_found,
                guesses=[guess for guess, _ in game_round.history],
                feedback=[feedback for _, feedback in game_round.history],
                letter_states=game_round.letter_states(),
                answer=game.secret_word if game.is_over else None,
                message=game_round.outcome_message()
            )

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        A guess that was already made is replayed without checking the word
        list again.

        Returns:
            Tuple of (is_valid, error_message)
        """
        with self._lock:
            game_round = self.games.get(game_id)
            if game_round is None:
                return False, "Game not found"

            if game_round.game.is_over:
                return False, "Game is already over"

            if not guess or not isinstance(guess, str):
                return False, "Guess must be a valid string"

            normalized_guess = guess.strip().upper()
            try:
                game_round.game.validate_guess(normalized_guess)
            except InvalidGuess as e:
                return False, e.reason

            if normalized_guess in game_round.game.guesses:
                return True, ""

            if not self.word_source.is_legal_word(normalized_guess):
                return False, "Not in word list"

            return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[Tuple[str, GameState]]:
        """
        Processes a guess and updates game state.

        Returns:
            Tuple of (feedback, updated GameState) or None if invalid
        """
        with self._lock:
            is_valid, error = self.is_valid_guess(game_id, guess)
            if not is_valid:
                logger.debug("Rejected guess %r for game %s: %s", guess, game_id, error)
                return None

            normalized_guess = guess.strip().upper()
            feedback = self.games[game_id].submit(normalized_guess)
            return feedback, self.get_game_state(game_id)

    def active_game_count(self) -> int:
        with self._lock:
            return sum(1 for game_round in self.games.values() if not game_round.game.is_over)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False


def get_game_service() -> Optional[GameService]:
    """Get the game service of the current application."""
    return current_app.extensions.get('game_service')


def init_game_service(app, word_source: WordSource) -> GameService:
    """Create the game service and register it on the application."""
    service = GameService(word_source)
    app.extensions['game_service'] = service
    return service
