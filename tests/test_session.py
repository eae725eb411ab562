import random

import pytest
from collections import Counter

from packages.engine import GameSession, DEFAULT_ROOT_WORD
from packages.lexicon import WordListDictionary

WORDS = ["silk", "worm", "worms", "milk", "owl", "skim", "slim", "silkworm", "to", "ox", "mow"]


@pytest.fixture
def dictionary():
    return WordListDictionary(WORDS)


@pytest.fixture
def session():
    return GameSession("silkworm")


def _invariants_hold(s: GameSession):
    lowered = [w.lower() for w in s.used_words]
    assert len(lowered) == len(set(lowered))
    assert s.score == sum(len(w) for w in s.used_words)
    root = Counter(s.root_word)
    for w in s.used_words:
        assert not (Counter(w) - root)
        assert w != s.root_word


# --- scenarios ---
def test_accept_silk(session, dictionary):
    r = session.submit("silk", dictionary)
    assert r.status == "accepted" and r.accepted and r.clear_input
    assert r.error is None and r.title == "" and r.message == ""
    assert session.score == 4 and r.score == 4
    assert session.used_words == ["silk"] and r.used_words == ("silk",)


def test_duplicate_is_not_original(session, dictionary):
    session.submit("silk", dictionary)
    r = session.submit("silk", dictionary)
    assert r.status == "rejected" and r.error == "not_original"
    assert not r.clear_input
    assert r.message == "You've entered silk already"
    assert session.score == 4 and session.used_words == ["silk"]


def test_ox_not_possible(session, dictionary):
    r = session.submit("ox", dictionary)
    assert r.error == "not_possible" and r.title == "Incorrect"


def test_root_word_rejected(session, dictionary):
    assert session.submit("silkworm", dictionary).error == "same_as_root"


def test_too_short_real_word():
    s = GameSession("silkworm")
    d = WordListDictionary(["ow", "to"])
    assert s.submit("ow", d).error == "too_short"


def test_nonword_short_reports_not_real(session, dictionary):
    assert session.submit("q", dictionary).error == "not_a_real_word"


@pytest.mark.parametrize("raw", ["", "   ", "\n", "\t \n"])
def test_blank_input_ignored(session, dictionary, raw):
    r = session.submit(raw, dictionary)
    assert r.status == "ignored" and r.error is None and not r.clear_input
    assert session.score == 0 and session.used_words == []


def test_input_is_trimmed_and_lowercased(session, dictionary):
    r = session.submit("  SiLk \n", dictionary)
    assert r.accepted and r.word == "silk"
    assert session.submit("SILK", dictionary).error == "not_original"


def test_most_recent_first_and_score_adds_length(session, dictionary):
    for w in ["silk", "worms", "owl"]:
        before = session.score
        r = session.submit(w, dictionary)
        assert r.accepted
        assert session.score == before + len(w)
    assert session.used_words == ["owl", "worms", "silk"]
    assert session.score == 12
    _invariants_hold(session)


@pytest.mark.parametrize("word", ["zzz", "ox", "silkworm", "q"])
def test_rejection_is_idempotent(session, dictionary, word):
    session.submit("silk", dictionary)
    snap = session.snapshot()
    first = session.submit(word, dictionary)
    second = session.submit(word, dictionary)
    assert first.status == second.status == "rejected"
    assert first.error == second.error
    assert session.snapshot() == snap


def test_random_play_keeps_invariants(session, dictionary):
    rng = random.Random(7)
    pool = WORDS + ["SILK", " worm ", "", "xyz", "mill"]
    for _ in range(200):
        session.submit(rng.choice(pool), dictionary)
        _invariants_hold(session)


# --- start ---
def test_start_resets_state(session, dictionary):
    session.submit("silk", dictionary)
    root = session.start(["Airplane"], random.Random(1))
    assert root == "airplane" == session.root_word
    assert session.used_words == [] and session.score == 0


def test_start_is_deterministic_with_seed():
    words = {"absolute", "airplane", "baseball", "birthday", "bookcase"}
    picks = [GameSession().start(words, random.Random(42)) for _ in range(3)]
    assert len(set(picks)) == 1 and picks[0] in words


def test_start_draws_every_candidate_eventually():
    words = ["absolute", "airplane", "baseball"]
    rng = random.Random(0)
    s = GameSession()
    seen = {s.start(words, rng) for _ in range(100)}
    assert seen == set(words)


@pytest.mark.parametrize("words", [[], set(), ["", "  ", "\n"]])
def test_start_falls_back_to_default(words):
    s = GameSession("airplane")
    assert s.start(words, random.Random(3)) == DEFAULT_ROOT_WORD == "silkworm"
    assert s.score == 0 and s.used_words == []


def test_start_without_rng():
    assert GameSession().start(["vacation"]) == "vacation"


def test_language_is_forwarded():
    s = GameSession("silkworm", language="fr")
    assert s.submit("silk", WordListDictionary(WORDS)).error == "not_a_real_word"
    assert s.submit("silk", WordListDictionary(WORDS, language="fr")).accepted


def test_start_rejects_bare_string():
    s = GameSession("airplane")
    with pytest.raises(TypeError):
        s.start("silkworm", random.Random(0))
    assert s.root_word == "airplane"
