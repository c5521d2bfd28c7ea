"""
Lightweight guess validation.

This module answers the question: "Is this guess well-formed?"
A letter guess is valid iff it is a single alphabetic character; a word guess
is valid iff it is an alphabetic string (and, when N is given, of length N).
Both are canonicalized to UPPERCASE, which is how the game and the solvers
store every letter.

Whether a guess is *allowed right now* (game still running) is the game's
concern, not this module's.
"""

from typing import Optional


def normalize_letter(ch: str) -> str:
    """
    Return `ch` uppercased, or raise ValueError if it isn't one letter.
    """
    if not isinstance(ch, str):
        raise ValueError(f"letter guess must be a string, got {type(ch).__name__}")
    c = ch.strip().upper()
    if len(c) != 1 or not c.isalpha():
        raise ValueError(f"letter guess must be a single letter, got {ch!r}")
    return c


def normalize_word(word: str, N: Optional[int] = None) -> str:
    """
    Return `word` stripped and uppercased, or raise ValueError if it isn't
    alphabetic (or doesn't have length N when N is given).
    """
    if not isinstance(word, str):
        raise ValueError(f"word guess must be a string, got {type(word).__name__}")
    w = word.strip().upper()
    if not w or not w.isalpha():
        raise ValueError(f"word guess must be alphabetic, got {word!r}")
    if N is not None and len(w) != N:
        raise ValueError(f"word guess must have length {N}, got {word!r}")
    return w

