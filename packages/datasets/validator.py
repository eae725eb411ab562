"""
Dataset validator for the word game.

What this module does:
- Validate a pair of word lists: start.txt (candidate root words) and
  dictionary.txt (words the player may submit).
- Enforce formatting rules (lowercase, a–z only, one per line; root words must
  be longer than the shortest acceptable submission).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that every root word is itself a dictionary word.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/start.txt",
                             "packages/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Callable, Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, dictionary) pair."""
    min_len: int
    start: FileReport
    dictionary: FileReport
    start_in_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, accept: Callable[[str], bool]) -> Tuple[List[str], int]:
    """
    Load words from a text file, counting lines rejected by `accept`.

    Blank lines are skipped silently (a trailing newline is normal); every
    other line must be already-lowercase alphabetic and satisfy `accept`.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w == w.lower() and w.isalpha() and accept(w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(start_path: str, dictionary_path: str, *, min_len: int = 3) -> Dict:
    """
    Validate the start-word and dictionary lists.

    Parameters
    ----------
    start_path : str
        Candidate root words, one per line.
    dictionary_path : str
        Words accepted as "real", one per line.
    min_len : int
        Shortest acceptable submission; root words must be longer than this.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, invalid/duplicate diagnostics, the start ⊆ dictionary
        check, `passed` and `issues`.
    """
    if min_len < 1:
        raise ValueError(f"min_len must be >= 1; got {min_len}")

    issues: List[str] = []
    start_p = Path(start_path)
    dict_p = Path(dictionary_path)

    # Early return if either file is missing
    if not start_p.exists() or not dict_p.exists():
        if not start_p.exists():
            issues.append(f"start file not found: {start_path}")
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            min_len=min_len,
            start=FileReport(start_path, start_p.exists(), 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dict_p.exists(), 0, "", 0, 0),
            start_in_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    start, start_invalid = _load_and_check(start_p, lambda w: len(w) > min_len)
    words, dict_invalid = _load_and_check(dict_p, lambda w: True)

    start_report = _file_report(start_p, start, start_invalid)
    dict_report = _file_report(dict_p, words, dict_invalid)

    start_set = set(start)
    subset_ok = start_set.issubset(set(words))
    if not subset_ok:
        # A few examples are enough to track the problem down
        missing = sorted(start_set - set(words))[:5]
        issues.append(f"start words missing from dictionary (e.g., {missing})")

    if start_report.count == 0:
        issues.append("start file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    if start_invalid:
        issues.append(f"start has {start_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")

    if start_report.count != start_report.unique_count:
        issues.append("start contains duplicate lines")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    # Duplicates are reported but do not fail validation
    passed = (
            subset_ok
            and start_invalid == 0
            and dict_invalid == 0
            and start_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        min_len=min_len,
        start=start_report,
        dictionary=dict_report,
        start_in_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=40 (uniq=40, sha=abc123...) | dictionary=900 (uniq=900, sha=def456...) | start⊆dictionary=True | OK
    """
    a = report["start"]
    b = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start⊆dictionary={report['start_in_dictionary']} | {status}"
    )
