"""
Download a plain-text English word list and write a cleaned dictionary file.

What it does:
- Downloads a newline-delimited word list over HTTP.
- Keeps lowercase a–z words within the length bounds, de-duplicated.
- Writes one word per line (sorted) to --out.

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/dictionary.txt
    python -m script.fetch_wordlist --url <other list> --max-len 8 --out words.txt
"""

import argparse

import requests

from packages.datasets.io import write_lines
from script.clean_wordlist import clean_words

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL, *, min_len: int = 1, max_len: int | None = None,
                timeout: float = 30.0) -> list[str]:
    """Fetch `url` and return its cleaned, sorted word list."""
    resp = requests.get(url, timeout=timeout, headers={"User-Agent": "Mozilla/5.0"})
    resp.raise_for_status()
    return sorted(clean_words(resp.text.splitlines(), min_len=min_len, max_len=max_len))


def main(argv=None):
    ap = argparse.ArgumentParser(description="Download a word list for the dictionary.")
    ap.add_argument("--url", default=URL, help="plain-text word list URL")
    ap.add_argument("--out", required=True, help="output .txt path")
    ap.add_argument("--min-len", type=int, default=1)
    ap.add_argument("--max-len", type=int, help="e.g. 8 to match the root words")
    args = ap.parse_args(argv)

    words = fetch_words(args.url, min_len=args.min_len, max_len=args.max_len)
    path = write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {path}")


if __name__ == "__main__":
    main()
