from pathlib import Path

from script import clean_wordlist, fetch_wordlist


def test_clean_words():
    lines = ["Silk", "silk", "  worm ", "", "o'clock", "ox", "silkworms"]
    assert clean_wordlist.clean_words(lines, min_len=3, max_len=8) == ["silk", "worm"]


def test_clean_main_writes_sorted(tmp_path: Path):
    inp = tmp_path / "in.txt"
    inp.write_text("worm\nSilk\nworm\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    clean_wordlist.main(["--in", str(inp), "--out", str(out), "--sort"])
    assert out.read_text(encoding="utf-8") == "silk\nworm\n"


class _Resp:
    text = "Silk\nworm\n\nworm\nox\n"

    def raise_for_status(self):
        pass


def test_fetch_words(monkeypatch):
    calls = []

    def fake_get(url, **kw):
        calls.append(url)
        return _Resp()

    monkeypatch.setattr(fetch_wordlist.requests, "get", fake_get)
    assert fetch_wordlist.fetch_words("http://example.test/words.txt", min_len=3) == ["silk", "worm"]
    assert calls == ["http://example.test/words.txt"]
