import pytest
from packages.engine import is_possible, possible_words, check_word, error_text
from packages.lexicon import WordListDictionary

WORDS = ["silk", "worm", "worms", "milk", "owl", "silkworm", "to", "ox", "mill", "slim"]


@pytest.fixture
def dictionary():
    return WordListDictionary(WORDS)


# --- letter availability (multiset subset, order-free) ---
@pytest.mark.parametrize("word,root,expected", [
    ("silk", "silkworm", True),
    ("worms", "silkworm", True),
    ("klis", "silkworm", True),        # order doesn't matter
    ("silkworm", "silkworm", True),
    ("ox", "silkworm", False),         # no 'x'
    ("mill", "silkworm", False),       # only one 'l'
    ("silkworms", "silkworm", False),  # one 's' too many
    ("", "silkworm", True),
    ("letter", "letter", True),
    ("settle", "letter", False),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_possible_words_filters_and_dedupes():
    words = ["Silk", "silk", "ox", "to", "milk", "silkworm", "worms", "mill"]
    assert possible_words("silkworm", words) == ["silk", "milk", "worms"]


def test_possible_words_min_len():
    assert possible_words("silkworm", ["ow", "owl"], min_len=2) == ["ow", "owl"]


# --- gate order ---
def test_check_word_accepts(dictionary):
    assert check_word("silk", root="silkworm", used=[], dictionary=dictionary) is None


@pytest.mark.parametrize("word,used,expected", [
    ("xq", [], "not_a_real_word"),        # short AND not real -> not real wins
    ("q", [], "not_a_real_word"),
    ("ox", [], "not_possible"),           # real, short, impossible -> impossible wins
    ("mill", [], "not_possible"),
    ("silk", ["silk"], "not_original"),
    ("to", [], "not_possible"),           # no 't' in silkworm
    ("silkworm", [], "same_as_root"),
])
def test_check_word_order(dictionary, word, used, expected):
    assert check_word(word, root="silkworm", used=used, dictionary=dictionary) == expected


def test_check_word_too_short_before_same_as_root():
    d = WordListDictionary(["ow", "to"])
    assert check_word("to", root="toad", used=[], dictionary=d) == "too_short"
    # a two-letter root equal to the candidate is reported as too short first
    assert check_word("ow", root="ow", used=[], dictionary=d) == "too_short"


def test_check_word_original_is_case_insensitive(dictionary):
    assert check_word("silk", root="silkworm", used=["SILK"], dictionary=dictionary) == "not_original"


def test_check_word_passes_language(dictionary):
    assert check_word("silk", root="silkworm", used=[], dictionary=dictionary,
                      language="fr") == "not_a_real_word"


def test_error_text():
    assert error_text("not_original", "silk") == ("Get creative", "You've entered silk already")
    assert error_text("too_short")[0] == "Word is too short"
    with pytest.raises(ValueError):
        error_text("nope")
