"""
Normalize a word list for use as start.txt or dictionary.txt.

Features:
- Lowercases and strips every line; drops blank lines.
- Keeps only alphabetic a–z words within --min-len/--max-len.
- Removes duplicates, preserving first-seen order (or --sort afterwards).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in packages/datasets/data/start.txt \
        --min-len 8 --max-len 8 --sort
"""

import argparse
import re
from pathlib import Path

from packages.datasets.io import read_lines, write_lines

WORD_RE = re.compile(r"^[a-z]+$")


def clean_words(lines, min_len: int = 1, max_len: int | None = None) -> list[str]:
    """Lowercase, filter to a–z words within the length bounds, stable dedupe."""
    seen, out = set(), []
    for raw in lines:
        w = raw.strip().lower()
        if not WORD_RE.match(w) or len(w) < min_len:
            continue
        if max_len is not None and len(w) > max_len:
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Clean a newline-delimited word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--min-len", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--max-len", type=int, help="drop words longer than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_words(lines, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
