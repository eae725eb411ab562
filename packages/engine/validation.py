"""
Submission validation: the ordered gate a candidate word must pass.

Rules, in order (the first failing rule decides the reported error):
  1. not a dictionary word            -> "not_a_real_word"
  2. not spelled from the root letters -> "not_possible"
  3. already accepted this session     -> "not_original"
  4. shorter than MIN_WORD_LENGTH      -> "too_short"
  5. identical to the root word        -> "same_as_root"

Empty input is handled by the session before this gate runs (it is ignored,
not rejected). The order matters: a one-letter non-word reports
"not_a_real_word", never "too_short".
"""

from typing import Dict, Iterable, Literal, Optional, Tuple

from .letters import is_possible

ErrorKind = Literal[
    "not_a_real_word",
    "not_possible",
    "not_original",
    "too_short",
    "same_as_root",
]

MIN_WORD_LENGTH = 3
DEFAULT_ROOT_WORD = "silkworm"
DEFAULT_LANGUAGE = "en"

# (title, message) shown to the player; "{word}" is filled with the candidate.
ERROR_TEXT: Dict[str, Tuple[str, str]] = {
    "not_a_real_word": ("Not a real word", "Enter a correct English word"),
    "not_possible": ("Incorrect", "Try a different combination"),
    "not_original": ("Get creative", "You've entered {word} already"),
    "too_short": ("Word is too short", "Enter words with at least three letters"),
    "same_as_root": ("Word is same as root word", "Enter a different word"),
}


def check_word(
        word: str,
        *,
        root: str,
        used: Iterable[str],
        dictionary,
        language: str = DEFAULT_LANGUAGE,
) -> Optional[ErrorKind]:
    """
    Run the gate for an already-normalized (stripped, lowercase, non-empty) word.

    Args:
      word       : candidate word
      root       : current root word (lowercase)
      used       : words accepted so far this session
      dictionary : object with is_real_word(word, language) -> bool
      language   : language code passed through to the dictionary

    Returns:
      None if the word is acceptable, else the first ErrorKind that applies.
    """
    if not dictionary.is_real_word(word, language):
        return "not_a_real_word"

    if not is_possible(word, root):
        return "not_possible"

    if word in {u.lower() for u in used}:
        return "not_original"

    if len(word) < MIN_WORD_LENGTH:
        return "too_short"

    if word == root:
        return "same_as_root"

    return None


def error_text(kind: str, word: str = "") -> Tuple[str, str]:
    """Return the (title, message) pair for an error kind."""
    try:
        title, message = ERROR_TEXT[kind]
    except KeyError as e:
        raise ValueError(f"Unknown error kind: {kind}. Available: {sorted(ERROR_TEXT)}") from e
    return title, message.format(word=word)
