"""
Dictionary Service

Membership checks and random answer selection over a word list.
"""

import random
from typing import Iterable, Iterator, List, Optional

from ..config.game_settings import load_word_list


class Dictionary:
    """
    Set of valid words plus a random picker.

    The random source is injected so that answer selection can be made
    deterministic in tests.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        self._words: List[str] = list(dict.fromkeys(words))
        if not self._words:
            raise ValueError("Dictionary cannot be empty")
        self._lookup = frozenset(self._words)
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, json_file_path: Optional[str] = None,
                  rng: Optional[random.Random] = None) -> "Dictionary":
        """Build a dictionary from a JSON word list (the packaged one by default)."""
        return cls(load_word_list(json_file_path), rng=rng)

    def contains(self, word: str) -> bool:
        return word in self._lookup

    def random_word(self) -> str:
        return self._rng.choice(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


# Global dictionary instance
_default_dictionary = None


def get_dictionary() -> Dictionary:
    """Get the packaged dictionary, loading it on first use."""
    global _default_dictionary
    if _default_dictionary is None:
        _default_dictionary = Dictionary.from_file()
    return _default_dictionary
