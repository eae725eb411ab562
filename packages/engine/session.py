"""
Game session state: one root word, the accepted words, and the score.

A session is reset by `start` and mutated only by `submit`. Callers (a CLI, a
notebook, a web handler) get plain `SubmitResult` values back and decide how
to display them; nothing here knows about input fields or alerts.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional, Tuple

from .validation import (
    DEFAULT_LANGUAGE,
    DEFAULT_ROOT_WORD,
    ErrorKind,
    check_word,
    error_text,
)

Status = Literal["accepted", "rejected", "ignored"]


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one submission plus a snapshot of the session after it."""
    status: Status
    word: str                       # normalized candidate ("" when ignored)
    score: int
    used_words: Tuple[str, ...]     # most-recent-first
    error: Optional[ErrorKind] = None

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"

    @property
    def clear_input(self) -> bool:
        """Only a successful submission empties the caller's input buffer."""
        return self.accepted

    @property
    def title(self) -> str:
        return error_text(self.error, self.word)[0] if self.error else ""

    @property
    def message(self) -> str:
        return error_text(self.error, self.word)[1] if self.error else ""


class GameSession:
    """
    Mutable state for one play-through.

    Attributes:
      root_word  : lowercase word whose letters constrain every submission
      used_words : accepted words, most recent first
      score      : sum of the lengths of used_words
      language   : language code passed to the dictionary oracle
    """

    def __init__(self, root_word: str = DEFAULT_ROOT_WORD, *, language: str = DEFAULT_LANGUAGE):
        self.root_word: str = root_word.strip().lower()
        self.used_words: List[str] = []
        self.score: int = 0
        self.language = language

    def start(self, candidate_words: Iterable[str], rng: random.Random | None = None) -> str:
        """
        Pick a new root word uniformly at random and clear the session.

        Blank candidates are ignored; if nothing usable remains the default
        root word is used instead of failing. Candidates are sorted before the
        draw so a seeded `rng` is reproducible for sets as well as lists.

        Returns the new root word.
        Raises TypeError for a bare string (it would be read letter by letter).
        """
        if isinstance(candidate_words, str):
            raise TypeError("candidate_words must be a collection of words, not a str")
        rng = rng or random.Random()
        pool = sorted({w.strip().lower() for w in candidate_words if w.strip()})

        self.root_word = rng.choice(pool) if pool else DEFAULT_ROOT_WORD
        self.used_words = []
        self.score = 0
        return self.root_word

    def submit(self, candidate: str, dictionary) -> SubmitResult:
        """
        Validate `candidate` and, if it passes every rule, record it.

        Args:
          candidate  : raw player input (whitespace and case are normalized)
          dictionary : object with is_real_word(word, language) -> bool

        Returns:
          SubmitResult with status "ignored" (blank input), "rejected"
          (error set, session unchanged) or "accepted".
        """
        word = candidate.strip().lower()

        if not word:
            return self._result("ignored", "")

        err = check_word(
            word,
            root=self.root_word,
            used=self.used_words,
            dictionary=dictionary,
            language=self.language,
        )
        if err is not None:
            return self._result("rejected", word, err)

        self.used_words.insert(0, word)
        self.score += len(word)
        return self._result("accepted", word)

    def snapshot(self) -> dict:
        """Plain-dict view of the session (for manifests and JSON responses)."""
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "score": self.score,
        }

    def _result(self, status: Status, word: str, error: Optional[ErrorKind] = None) -> SubmitResult:
        return SubmitResult(
            status=status,
            word=word,
            score=self.score,
            used_words=tuple(self.used_words),
            error=error,
        )
