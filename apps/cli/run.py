# apps/cli/run.py
"""
CLI entry point for autoplay runs.

This script:
  1) Validates the word lists (prints counts + SHA, checks start ⊆ dictionary).
  2) Loads the lists and builds the dictionary oracle.
  3) Plays every (or a sampled set of) root word(s) to exhaustion with a live
     progress indicator and writes:
       - CSV:  per-root results (words found, max score, rejections)
       - JSON: manifest with config, wordlist hashes, summary, git commit
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Iterable, List

from tqdm import tqdm

from packages.datasets import START_WORDS_PATH, DICTIONARY_PATH, load_words
from packages.datasets import validate_wordlists, pretty_summary
from packages.engine import MIN_WORD_LENGTH
from packages.harness import run_batch, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.lexicon import load_dictionary


def _plain_progress(cases: List[str]) -> Iterable[str]:
    """Yield cases while printing a one-line counter to stderr (at most once per second)."""
    total = len(cases)
    start = time.time()
    last_print = 0.0
    for idx, root in enumerate(cases, 1):
        yield root
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n")
    sys.stderr.flush()


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordgame — autoplay every root word")
    ap.add_argument("--start", default=str(START_WORDS_PATH),
                    help="path to root-word list")
    ap.add_argument("--dictionary", default=str(DICTIONARY_PATH),
                    help="path to dictionary word list")
    ap.add_argument("--language", default="en", help="dictionary language code")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of root words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--strict", action="store_true",
                    help="exit with status 1 if word-list validation fails")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)
    if args.sample is not None and args.sample < 0:
        ap.error(f"--sample must be >= 0; got {args.sample}")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.start, args.dictionary, min_len=MIN_WORD_LENGTH)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}", file=sys.stderr)
    if args.strict and not rep["passed"]:
        print("Validation failed — fix word lists before running.", file=sys.stderr)
        return 1

    # 2) Load lists into memory
    try:
        roots = load_words(args.start)
        dictionary = load_dictionary(args.dictionary, language=args.language)
    except FileNotFoundError as e:
        print(f"Could not load word list: {e}", file=sys.stderr)
        return 1

    # 3) Play the (optionally sampled) root words with live progress
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    if mode == "bar":
        progress = lambda cases: tqdm(cases, ncols=80, desc="Playing", unit="root")  # noqa: E731
    elif mode == "plain":
        progress = _plain_progress
    else:
        progress = None

    results = run_batch(roots, dictionary=dictionary, words=dictionary.words(),
                        seed=args.seed, sample=args.sample, progress=progress)

    # 4) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "summary": summary,
    }, str(manifest_path))

    ms = summary["max_score"]
    print(f"Max score: mean {ms['mean']:.1f} | median {ms['median']:.1f} | best {ms['max']:.0f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
