"""
Candidate filtering given the revealed pattern.

Given:
  - a pool of words (e.g., the dictionary, or last turn's candidates)
  - the pattern revealed so far, e.g. "C-T"
  - the set of letters already ruled out for unrevealed slots

Return:
  - words that are consistent with what the game has shown.

A word matches when every revealed position agrees with the pattern and no
unrevealed position holds an already-guessed letter (had it been there, the
guess would have revealed it).
"""

from typing import AbstractSet, Iterable, List
from .scoring import MYSTERY_LETTER


def matches(pattern: str, word: str, guessed: AbstractSet[str]) -> bool:
    """
    True iff `word` agrees with `pattern` on every revealed position and holds
    no letter of `guessed` at any mystery position.

    Examples:
      matches("C-T", "COT", {"A"}) -> True
      matches("C-T", "CAT", {"A"}) -> False
    """
    if len(word) != len(pattern):
        return False
    for p, ch in zip(pattern, word):
        if p != MYSTERY_LETTER:
            if p != ch:
                return False
        elif ch in guessed:
            return False
    return True


def filter_candidates(words: Iterable[str], pattern: str,
                      guessed: AbstractSet[str]) -> List[str]:
    """
    Keep only the words consistent with `pattern` and `guessed`.

    Returns:
      List[str] of matching words (order preserved as in `words`).
    """
    return [w for w in words if matches(pattern, w, guessed)]
