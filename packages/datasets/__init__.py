from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, load_words, START_WORDS_PATH, DICTIONARY_PATH

__all__ = [
    "validate_wordlists", "pretty_summary", "read_lines", "write_lines", "load_words",
    "START_WORDS_PATH", "DICTIONARY_PATH",
]
