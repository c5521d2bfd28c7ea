"""
Hangman game state.

HangmanGame holds one secret word and everything the player has learned about
it: the revealed pattern, the letters guessed right and wrong, and the whole
words guessed wrong. It scores itself and reports its status, but never
decides what to guess; that is a solver's job.

Letters and words are canonicalized to UPPERCASE on the way in.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Set

from .scoring import MYSTERY_LETTER, blank_pattern, reveal, score
from .validation import normalize_letter, normalize_word


class GameOverError(RuntimeError):
    """Raised when a guess is made after the game has been won or lost."""


class Status(Enum):
    GAME_WON = "GAME_WON"
    GAME_LOST = "GAME_LOST"
    KEEP_GUESSING = "KEEP_GUESSING"


class HangmanGame:
    # re-exported so callers can write HangmanGame.MYSTERY_LETTER
    MYSTERY_LETTER = MYSTERY_LETTER
    Status = Status

    def __init__(self, secret_word: str, max_wrong_guesses: int):
        """
        Args:
            secret_word:       the word that needs to be guessed
            max_wrong_guesses: wrong letter/word guesses allowed; making one
                               more than this loses the game
        """
        self._secret = normalize_word(secret_word)
        self._max_wrong = int(max_wrong_guesses)
        self._revealed: List[str] = list(blank_pattern(len(self._secret)))
        self._correct_letters: Set[str] = set()
        self._wrong_letters: Set[str] = set()
        self._wrong_words: Set[str] = set()

    # ---- guesses ----

    def guess_letter(self, ch: str) -> str:
        """
        Guess a letter and update the state.

        Returns:
            The pattern after the guess (MYSTERY_LETTER for unknown letters).
        """
        self._assert_can_keep_guessing()
        ch = normalize_letter(ch)

        if reveal(self._secret, self._revealed, ch):
            self._correct_letters.add(ch)
        else:
            self._wrong_letters.add(ch)
        return self.guessed_so_far

    def guess_word(self, guess: str) -> str:
        """
        Guess the whole word and update the state.

        Returns:
            The pattern after the guess; the full secret if it was right.
        """
        self._assert_can_keep_guessing()
        guess = normalize_word(guess)

        if guess == self._secret:
            self._revealed = list(self._secret)
        else:
            self._wrong_words.add(guess)
        return self.guessed_so_far

    def _assert_can_keep_guessing(self) -> None:
        status = self.game_status
        if status is not Status.KEEP_GUESSING:
            raise GameOverError(f"Cannot keep guessing in current game state: {status.value}")

    # ---- status & score ----

    @property
    def game_status(self) -> Status:
        if self.guessed_so_far == self._secret:
            return Status.GAME_WON
        if self.num_wrong_guesses_made > self._max_wrong:
            return Status.GAME_LOST
        return Status.KEEP_GUESSING

    @property
    def current_score(self) -> int:
        return score(self.num_wrong_guesses_made, len(self._correct_letters),
                     lost=self.game_status is Status.GAME_LOST)

    @property
    def num_wrong_guesses_made(self) -> int:
        return len(self._wrong_letters) + len(self._wrong_words)

    @property
    def num_wrong_guesses_remaining(self) -> int:
        return self._max_wrong - self.num_wrong_guesses_made

    @property
    def max_wrong_guesses(self) -> int:
        return self._max_wrong

    # ---- observable state (copies; mutating them doesn't touch the game) ----

    @property
    def guessed_so_far(self) -> str:
        return "".join(self._revealed)

    @property
    def correctly_guessed_letters(self) -> Set[str]:
        return set(self._correct_letters)

    @property
    def incorrectly_guessed_letters(self) -> Set[str]:
        return set(self._wrong_letters)

    @property
    def all_guessed_letters(self) -> Set[str]:
        return self._correct_letters | self._wrong_letters

    @property
    def incorrectly_guessed_words(self) -> Set[str]:
        return set(self._wrong_words)

    @property
    def secret_word_length(self) -> int:
        return len(self._secret)

    def __str__(self) -> str:
        return f"{self.guessed_so_far}; score={self.current_score}; status={self.game_status.value}"
