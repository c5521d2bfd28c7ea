from __future__ import annotations
import random
from typing import AbstractSet, Dict, FrozenSet, Iterable, Type

from hangman_ai.engine.game import HangmanGame
from hangman_ai.engine.guesses import Guess
from hangman_ai.engine.constraints import filter_candidates
from hangman_ai.engine.scoring import MYSTERY_LETTER, blank_pattern
from .candidates import CandidateSet

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


def effective_excluded(pattern: str, guessed_letters: AbstractSet[str],
                       wrong_words: AbstractSet[str]) -> FrozenSet[str]:
    """
    Guessed letters plus what failed word guesses leak.

    A wrong word guess tells us its letter at the first blank is not the
    secret's letter there, even though that letter was never guessed on its
    own. The game's guessed-letter set is left untouched.
    """
    excluded = set(guessed_letters)
    idx = pattern.find(MYSTERY_LETTER)
    if wrong_words and idx >= 0:
        for w in wrong_words:
            if idx < len(w):
                excluded.add(w[idx])
    return frozenset(excluded)


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 0
        self.candidates: CandidateSet = CandidateSet.build("", frozenset(), ())
        self.rng = random.Random()

    def reset(self, *, dictionary: Iterable[str], N: int, seed: int | None = None) -> None:
        """
        Start a new game: every dictionary word of length N is a candidate,
        nothing has been guessed and the whole pattern is blank.
        """
        self.N = int(N)
        blank = blank_pattern(self.N)
        # uppercase, then drop repeats ("cat" and "CAT" are one candidate)
        words = dict.fromkeys(w.strip().upper() for w in dictionary)
        self.candidates = CandidateSet.build(
            blank, frozenset(), filter_candidates(words, blank, frozenset()))
        if seed is not None:
            self.rng.seed(seed)

    @classmethod
    def for_game(cls, game: HangmanGame, dictionary: Iterable[str],
                 seed: int | None = None) -> "BaseSolver":
        """Build and reset a solver sized for `game`."""
        solver = cls()
        solver.reset(dictionary=dictionary, N=game.secret_word_length, seed=seed)
        return solver

    def sync_candidates(self, game: HangmanGame) -> FrozenSet[str]:
        """
        Bring `self.candidates` up to date with the game and return the
        effective excluded-letter set it was built with.

        Rebuilds from the current candidates (never the dictionary): the pool
        only shrinks turn over turn. Reuses the held set when nothing changed.
        """
        pattern = game.guessed_so_far
        excluded = effective_excluded(pattern, game.all_guessed_letters,
                                      game.incorrectly_guessed_words)
        if not self.candidates.built_for(pattern, excluded):
            self.candidates = CandidateSet.build(pattern, excluded, self.candidates)
        return excluded

    def next_guess(self, game: HangmanGame) -> Guess:
        raise NotImplementedError("Override in subclass")

    def describe(self) -> str:
        """One-line debug summary, e.g. LetterFreqSolver[CandidateSet[3]]."""
        return f"{type(self).__name__}[{self.candidates}]"

    def __str__(self) -> str:
        return self.describe()
