"""
Letter-availability checks against a root word.

A candidate is "possible" when it can be spelled from the root word's letters
without using any letter more often than it appears in the root. This is a
multiset-subset test, not a subsequence test: order does not matter.

Examples (root "silkworm"):
  is_possible("silk", "silkworm")  -> True
  is_possible("worms", "silkworm") -> True
  is_possible("ox", "silkworm")    -> False   (no 'x')
  is_possible("mill", "silkworm")  -> False   (only one 'l')
"""

from collections import Counter
from typing import Iterable, List


def is_possible(word: str, root: str) -> bool:
    """
    Return True if every letter of `word` can be taken from `root`,
    consuming one occurrence per use.
    """
    # Scratch copy of the root's letters; each hit consumes one occurrence.
    remaining = Counter(root)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1
    return True


def possible_words(root: str, words: Iterable[str], min_len: int = 3) -> List[str]:
    """
    Every word from `words` that could be accepted against `root` on letters
    alone: spelled from the root, at least `min_len` long, not the root itself.

    Dictionary membership and session history are NOT checked here.

    Returns:
      List[str] of lowercase words, de-duplicated, order preserved as in `words`.
    """
    root = root.strip().lower()
    seen = set()
    out: List[str] = []

    for w in words:
        w = w.strip().lower()
        if len(w) < min_len or len(w) > len(root) or w == root or w in seen:
            continue
        if is_possible(w, root):
            seen.add(w)
            out.append(w)

    return out
