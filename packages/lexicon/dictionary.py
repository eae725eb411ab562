from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from packages.datasets.io import load_words


class BaseDictionary:
    """
    Word oracle consulted by the session for the "is it a real word" rule.

    Subclasses override is_real_word and words; lookups are case-insensitive.
    """
    id = "base"

    def is_real_word(self, word: str, language: str = "en") -> bool:
        raise NotImplementedError("Override in subclass")

    def words(self) -> list[str]:
        """Known words, sorted; used for hints and autoplay searches."""
        raise NotImplementedError("Override in subclass")


class WordListDictionary(BaseDictionary):
    """
    Dictionary backed by an in-memory word list for a single language.

    Words for any other language are reported as not real.
    """
    id = "wordlist"

    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def is_real_word(self, word: str, language: str = "en") -> bool:
        if language != self.language:
            return False
        w = word.strip().lower()
        return bool(w) and w in self._words

    def words(self) -> list[str]:
        """All known words, sorted (stable input for anagram search)."""
        return sorted(self._words)

    def __contains__(self, word: str) -> bool:
        return self.is_real_word(word, self.language)

    def __len__(self) -> int:
        return len(self._words)


def load_dictionary(path: Path | str, language: str = "en") -> WordListDictionary:
    """
    Build a WordListDictionary from a newline-delimited word file.
    Raises FileNotFoundError if the path doesn't exist.
    """
    return WordListDictionary(load_words(path), language=language)
