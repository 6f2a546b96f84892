"""
Word Source Service

Loads the secret and legal word lists and answers the two questions the
game asks of them: which word to play, and whether a guess is a real word.
"""

import logging
import random
from typing import Iterable, List, Optional

from ..config.game_settings import WORD_LENGTH

logger = logging.getLogger(__name__)


def _read_word_file(path: str) -> List[str]:
    """
    Reads a newline-delimited word list.

    Returns:
        List[str]: Upper-cased words, blank lines skipped

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the list is empty or contains invalid words
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = [line.strip().upper() for line in f if line.strip()]
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")

    validate_word_list_integrity(words)
    return words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent uppercase formatting

    Duplicates are tolerated; they only weight the random pick.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


class WordSource:
    """
    Supplies secret words and checks guess legality.

    Every secret word is also a legal guess.
    """

    def __init__(self, secret_words: Iterable[str], legal_words: Iterable[str] = (),
                 rng: Optional[random.Random] = None):
        self.secret_words = [word.upper() for word in secret_words]
        validate_word_list_integrity(self.secret_words)
        extra_words = [word.upper() for word in legal_words]
        if extra_words:
            validate_word_list_integrity(extra_words)
        self.legal_words = frozenset(self.secret_words) | frozenset(extra_words)
        self._rng = rng or random.Random()

    @classmethod
    def from_files(cls, secret_path: str, legal_path: Optional[str] = None,
                   rng: Optional[random.Random] = None) -> 'WordSource':
        """Builds a word source from newline-delimited word list files."""
        secret_words = _read_word_file(secret_path)
        legal_words = _read_word_file(legal_path) if legal_path else []
        logger.info("Loaded %d secret words and %d extra legal words", len(secret_words), len(legal_words))
        return cls(secret_words, legal_words, rng=rng)

    def pick_secret_word(self) -> str:
        return self._rng.choice(self.secret_words)

    def is_legal_word(self, candidate: str) -> bool:
        return candidate in self.legal_words

    def get_statistics(self) -> dict:
        stats = get_word_statistics(self.secret_words)
        stats["legal_words"] = len(self.legal_words)
        return stats
