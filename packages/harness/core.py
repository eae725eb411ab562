"""
Autoplay harness primitives.

- run_case:  play one root word to exhaustion, submitting every word the
             dictionary could offer, through the real session gate.
- run_batch: run many root words (optionally a seeded sample, see select_cases).
- summarize: aggregate statistics over a batch (numpy).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import random
import time
from collections import Counter
from typing import Callable, Dict, Iterable, List

import numpy as np

from packages.engine import GameSession, possible_words


def run_case(
        root: str,
        *,
        dictionary,
        words: Iterable[str],
        seed: int | None = None,
) -> Dict:
    """
    Find and submit every acceptable word for one root word.

    Candidates are taken from `words` with possible_words (letters only) and
    submitted in a seeded random order; the session still applies the full
    gate, so words the dictionary rejects are counted, not accepted.

    Args:
        root:       the root word for this case
        dictionary: oracle with is_real_word(word, language)
        words:      the word universe to search (usually dictionary.words())
        seed:       RNG seed for submission order

    Returns:
        dict with keys:
            root (str), found (int), max_score (int), longest (str),
            rejected (dict kind -> count), time_ms (float), words (list[str])
    """
    session = GameSession()
    session.start([root])

    candidates = possible_words(session.root_word, words)
    random.Random(seed).shuffle(candidates)

    rejected: Counter = Counter()
    t0 = time.perf_counter_ns()
    for w in candidates:
        r = session.submit(w, dictionary)
        if r.error:
            rejected[r.error] += 1
    dt_ms = (time.perf_counter_ns() - t0) / 1_000_000.0

    longest = max(session.used_words, key=lambda w: (len(w), w), default="")
    return {
        "root": session.root_word,
        "found": len(session.used_words),
        "max_score": session.score,
        "longest": longest,
        "rejected": dict(rejected),
        "time_ms": dt_ms,
        "words": list(session.used_words),
    }


def select_cases(roots: Iterable[str], *, seed: int | None = None,
                 sample: int | None = None) -> List[str]:
    """
    De-duplicate `roots` (order preserved) and, if `sample` is given, keep
    that many drawn by a seeded shuffle so runs are reproducible.
    """
    pool = list(dict.fromkeys(roots))
    if sample is not None:
        if sample < 0:
            raise ValueError(f"sample must be >= 0; got {sample}")
        random.Random(seed).shuffle(pool)
        pool = pool[:sample]
    return pool


def run_batch(
        roots: Iterable[str],
        *,
        dictionary,
        words: Iterable[str],
        seed: int | None = None,
        sample: int | None = None,
        progress: Callable[[List[str]], Iterable[str]] | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back over select_cases(roots, seed, sample).

    Each case's seed is derived from the base seed (seed + index).
    `progress`, if given, wraps the case list (e.g. a tqdm factory).
    """
    words = list(words)
    cases = select_cases(roots, seed=seed, sample=sample)
    iterator = progress(cases) if progress else cases

    out: List[Dict] = []
    for idx, root in enumerate(iterator, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(root, dictionary=dictionary, words=words, seed=case_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: mean / median / p90 / max of max_score and found.
    Returns zeros for an empty batch.
    """
    out: Dict = {"cases": len(results)}
    for key in ("max_score", "found"):
        vals = np.array([r[key] for r in results], dtype=float)
        if vals.size == 0:
            out[key] = {"mean": 0.0, "median": 0.0, "p90": 0.0, "max": 0.0}
            continue
        out[key] = {
            "mean": float(vals.mean()),
            "median": float(np.median(vals)),
            "p90": float(np.percentile(vals, 90)),
            "max": float(vals.max()),
        }
    return out
