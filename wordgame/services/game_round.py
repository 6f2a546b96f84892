"""
Game Round Controller

Owns one Game together with its LetterStateTracker for the length of a
round and keeps the turn-by-turn feedback history.
"""

from typing import Dict, List, Optional, Tuple

from ..models.game import Game
from ..models.letter_state import LetterStateTracker


class GameRound:
    """
    A Game and its keyboard tracker, driven as one unit.

    Callers are expected to serialize access; see GameService.
    """

    def __init__(self, game: Game, tracker: Optional[LetterStateTracker] = None):
        self.game = game
        self.tracker = tracker or LetterStateTracker()
        self.history: List[Tuple[str, str]] = []

    def submit(self, guess: str) -> str:
        """
        Scores a guess and folds its feedback into the keyboard states.

        Returns:
            str: Feedback symbols for the guess

        Raises:
            InvalidGuess: If the guess is malformed; the round is unchanged
        """
        recorded_before = self.game.num_guesses
        feedback = self.game.score(guess)
        self.tracker.observe_feedback(guess, feedback)
        if self.game.num_guesses > recorded_before:
            self.history.append((guess, feedback))
        return feedback

    def letter_states(self) -> Dict[str, str]:
        return self.tracker.snapshot()

    def outcome_message(self) -> Optional[str]:
        """Winning response after a win, the secret word after a loss."""
        if self.game.word_found:
            return Game.winning_response(self.game.num_guesses)
        if self.game.is_over:
            return self.game.secret_word
        return None

    def restart(self, secret_word: str) -> None:
        """Starts a fresh round with a new secret word."""
        self.game = Game(secret_word)
        self.tracker.reset()
        self.history = []
