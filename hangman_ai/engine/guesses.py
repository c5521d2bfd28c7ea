"""
Guess values emitted by solvers.

A solver never touches the game; it returns one of these and the harness
applies it with `make_guess(game)`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .game import HangmanGame


@dataclass(frozen=True)
class GuessLetter:
    letter: str

    def make_guess(self, game: HangmanGame) -> str:
        return game.guess_letter(self.letter)

    def __str__(self) -> str:
        return f"GuessLetter[{self.letter}]"


@dataclass(frozen=True)
class GuessWord:
    word: str

    def make_guess(self, game: HangmanGame) -> str:
        return game.guess_word(self.word)

    def __str__(self) -> str:
        return f"GuessWord[{self.word}]"


Guess = Union[GuessLetter, GuessWord]
