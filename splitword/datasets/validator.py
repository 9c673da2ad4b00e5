"""
Dictionary validator.

What this module does:
- Check a word list (JSON array or one word per line) before a game or batch.
- Enforce formatting rules (lowercase, a–z only, exact length N).
- Detect duplicates and invalid entries; compute SHA-256 of the raw file.
- Return a machine-readable dict (for batch manifests) and a one-line summary.

Typical use:
    from splitword.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("words.json", 5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple

from .io import read_entries


@dataclass
class DictionaryReport:
    path: str            # file path (as given)
    N: int               # expected word length
    exists: bool
    count: int           # number of VALID words
    unique_count: int    # valid words after dedupe
    invalid_entries: int
    sha256: str          # SHA-256 of raw file bytes (empty if missing)
    passed: bool
    issues: List[str]    # human-friendly problems, if any


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_entries(entries: List[str], N: int) -> Tuple[List[str], List[str]]:
    """
    Split raw entries into (valid, invalid). An entry is valid when it is
    already lowercase, ASCII alphabetic and exactly N letters long.
    """
    valid: List[str] = []
    invalid: List[str] = []
    for raw in entries:
        w = raw.strip()
        if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
            valid.append(w)
        else:
            invalid.append(raw)
    return valid, invalid


def validate_dictionary(path: str, N: int = 5) -> Dict:
    """
    Validate the dictionary at `path` for N-letter words.

    Returns:
      JSON-serializable dict (DictionaryReport schema). `passed` is strict:
      the file exists, parses, is non-empty, and has no invalid entries or
      duplicates.
    """
    p = Path(path)
    if not p.exists():
        return asdict(DictionaryReport(path, N, False, 0, 0, 0, "", False,
                                       [f"dictionary not found: {path}"]))

    issues: List[str] = []
    try:
        entries = read_entries(p)
    except ValueError as e:
        return asdict(DictionaryReport(str(p), N, True, 0, 0, 0, _sha256_file(p), False,
                                       [f"unreadable dictionary: {e}"]))

    valid, invalid = _check_entries(entries, N)
    unique = set(valid)

    if not valid:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"{len(invalid)} invalid entr{'y' if len(invalid) == 1 else 'ies'} "
                      f"(e.g., {invalid[:5]})")
    if len(unique) != len(valid):
        issues.append("dictionary contains duplicate words")

    rep = DictionaryReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(valid),
        unique_count=len(unique),
        invalid_entries=len(invalid),
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        N=5 | words=2315 (uniq=2315, sha=abc123def456) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_entries']} | {status}"
    )
