from .letters import is_possible, possible_words
from .validation import check_word, error_text, MIN_WORD_LENGTH, DEFAULT_ROOT_WORD
from .session import GameSession, SubmitResult
from .store import SessionStore

__all__ = [
    "is_possible", "possible_words", "check_word", "error_text",
    "GameSession", "SubmitResult", "SessionStore",
    "MIN_WORD_LENGTH", "DEFAULT_ROOT_WORD",
]
