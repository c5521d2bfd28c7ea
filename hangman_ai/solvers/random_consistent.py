"""
Random Consistent solver.

Strategy:
  - Keep the same candidate set as the other solvers.
  - One candidate left: guess that word.
  - Otherwise pick a candidate uniformly at random and guess one of its
    unrevealed letters, also at random.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline to verify the pipeline and to compare scores against;
    it ignores letter frequencies entirely.
"""

from __future__ import annotations

from typing import List

from hangman_ai.engine.game import HangmanGame
from hangman_ai.engine.guesses import Guess, GuessLetter, GuessWord
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, game: HangmanGame) -> Guess:
        excluded = self.sync_candidates(game)
        words = self.candidates.words

        if len(words) == 1:
            return GuessWord(words[0])

        # Raises NoSuggestionError when the pool is empty.
        word = words[self.rng.randrange(len(words))] if words else self.candidates.first()

        # Any candidate holds an unguessed letter at each blank position.
        letters: List[str] = sorted({ch for ch in word if ch not in excluded})
        return GuessLetter(letters[self.rng.randrange(len(letters))])
