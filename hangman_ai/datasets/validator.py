"""
Dictionary validator for hangmanAI.

What this module does:
- Validate a dictionary file (one word per line, any word length).
- Enforce formatting rules (alphabetic only, one word per line, no blanks).
- Detect duplicates (case-insensitive) and invalid lines; compute SHA-256 of
  the raw file.
- Histogram the word lengths (a game of length N can only be solved if some
  dictionary word has length N).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from hangman_ai.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after uppercase dedupe)
    invalid_lines: int   # number of invalid lines encountered
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> unique words
    passed: bool = False
    issues: List[str] = field(default_factory=list)


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


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be alphabetic (any case; normalized to UPPERCASE)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isalpha():
                valid.append(w.upper())
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Path to the dictionary (one word per line).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema) with:
          - counts, SHA-256, invalid-line count, length histogram
          - `passed` boolean (strict: requires non-empty, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, 0, "", 0, 0,
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)
    lengths = Counter(len(w) for w in unique)

    issues: List[str] = []
    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"dictionary contains {len(words) - len(unique)} duplicate line(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        lengths=dict(sorted(lengths.items())),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dict=words.txt | words=3 (uniq=3, sha=abc123...) | lengths=3..5 | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = report.get("lengths") or {}
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "-"
    return (
        f"dict={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| lengths={span} | invalid={report['invalid_lines']} | {status}"
    )
