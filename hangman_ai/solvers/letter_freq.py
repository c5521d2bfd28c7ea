"""
Letter-Frequency Solver.

Idea:
  - Keep the CURRENT candidate set (dictionary words still consistent with the
    revealed pattern and the letters guessed so far).
  - Rank the unguessed letters over that set: most occurrences first, then
    most words containing the letter, then alphabetically.
  - Guess the top letter; switch to whole-word guesses when that is cheaper.

When it guesses a word:
  - Only one candidate left: guess it, the game is decided.
  - No wrong guesses left and several blanks: a wrong letter would lose
    anyway, so take the first candidate as a last chance.
  - One blank left: put the top letter in the blank and guess the word. A
    correct letter would still cost one point under the scoring rule; the
    word costs nothing when right and the same one point when wrong.

Letters only inferred from failed word guesses stay eligible as letter
guesses with several blanks left, because they were never tested as letters.
"""

from __future__ import annotations

from hangman_ai.engine.game import HangmanGame
from hangman_ai.engine.guesses import Guess, GuessLetter, GuessWord
from hangman_ai.engine.scoring import MYSTERY_LETTER, num_blanks
from .base import BaseSolver, register


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency"
    version = "1.0.0"

    def next_guess(self, game: HangmanGame) -> Guess:
        """
        Decide the next guess from the game's observable state.

        Does not modify the game; the caller applies the returned guess.
        """
        excluded = self.sync_candidates(game)
        pattern = game.guessed_so_far

        if len(self.candidates) == 1:
            return GuessWord(self.candidates.first())

        if num_blanks(pattern) > 1:
            if game.num_wrong_guesses_remaining == 0:
                return GuessWord(self.candidates.first())
            return GuessLetter(self.candidates.suggest(game.all_guessed_letters))

        ch = self.candidates.suggest(excluded)
        return GuessWord(pattern.replace(MYSTERY_LETTER, ch))
