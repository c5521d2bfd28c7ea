from __future__ import annotations
from pathlib import Path
from typing import List, Set


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_dictionary(p: Path | str) -> Set[str]:
    """
    Load a one-word-per-line dictionary as a set of UPPERCASE words.
    Blank and non-alphabetic lines are skipped (validate_dictionary reports
    them); FileNotFoundError if the path doesn't exist.
    """
    words = (w.strip().upper() for w in read_lines(p))
    return {w for w in words if w.isalpha()}
