"""
Hangman scoring and letter reveal.

Conventions:
  - MYSTERY_LETTER ('-') marks a position of the secret word that has not
    been revealed yet, e.g. "AB--T".
  - Score (lower is better):
        wrong letter guesses + wrong word guesses + distinct correct letters
    while the game is won or still running; a flat LOST_GAME_SCORE once lost.

These helpers are pure; HangmanGame holds the state and calls into them.
"""

from typing import List

MYSTERY_LETTER = "-"

# Flat penalty for a lost game, whatever happened before.
LOST_GAME_SCORE = 25


def blank_pattern(n: int) -> str:
    """All-mystery pattern for a secret word of length n."""
    return MYSTERY_LETTER * n


def reveal(secret: str, revealed: List[str], letter: str) -> bool:
    """
    Uncover every position of `secret` holding `letter`, in place.

    Args:
      secret   : the (uppercase) secret word
      revealed : mutable per-position buffer, same length as `secret`
      letter   : the (uppercase) guessed letter

    Returns:
      True if at least one position was uncovered (a correct guess).
    """
    hit = False
    for i, ch in enumerate(secret):
        if ch == letter:
            revealed[i] = ch
            hit = True
    return hit


def num_blanks(pattern: str) -> int:
    """Number of still-unrevealed positions in `pattern`."""
    return pattern.count(MYSTERY_LETTER)


def score(wrong_guesses: int, correct_letters: int, lost: bool) -> int:
    """
    Apply the scoring rule.

    Examples:
      score(1, 3, False) -> 4
      score(6, 2, True)  -> 25
    """
    if lost:
        return LOST_GAME_SCORE
    return wrong_guesses + correct_letters
