"""
In-process registry of game sessions keyed by id.

Each session carries its own lock so that the validation gate and the
used_words/score update of a submission happen atomically when several
threads (e.g. request handlers) share the store.
"""

from __future__ import annotations

import random
import threading
import uuid
from typing import Dict, Iterable, Tuple

from .session import GameSession, SubmitResult
from .validation import DEFAULT_LANGUAGE


class SessionStore:
    def __init__(self, *, language: str = DEFAULT_LANGUAGE, seed: int | None = None):
        self.language = language
        self.rng = random.Random(seed)
        self._sessions: Dict[str, Tuple[GameSession, threading.Lock]] = {}
        self._lock = threading.Lock()  # guards the dict itself

    def create(self, candidate_words: Iterable[str]) -> str:
        """Create and start a new session; return its id."""
        session = GameSession(language=self.language)
        with self._lock:
            session.start(candidate_words, self.rng)
            sid = uuid.uuid4().hex
            self._sessions[sid] = (session, threading.Lock())
        return sid

    def _entry(self, session_id: str) -> Tuple[GameSession, threading.Lock]:
        with self._lock:
            try:
                return self._sessions[session_id]
            except KeyError:
                raise KeyError(f"Unknown session id: {session_id}") from None

    def snapshot(self, session_id: str) -> dict:
        """Copy of root_word/used_words/score, read under the session lock."""
        session, lock = self._entry(session_id)
        with lock:
            return session.snapshot()

    def start(self, session_id: str, candidate_words: Iterable[str]) -> str:
        """Restart an existing session with a new root word."""
        session, lock = self._entry(session_id)
        with self._lock:
            # the shared rng is not thread-safe; draw under the store lock
            seed = self.rng.getrandbits(32)
        with lock:
            return session.start(candidate_words, random.Random(seed))

    def submit(self, session_id: str, candidate: str, dictionary) -> SubmitResult:
        session, lock = self._entry(session_id)
        with lock:
            return session.submit(candidate, dictionary)

    def drop(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise KeyError(f"Unknown session id: {session_id}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions
