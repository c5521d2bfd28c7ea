"""
Candidate Set: the words still consistent with the game, plus letter stats.

A CandidateSet is built once from (pattern, guessed letters, source words) and
is read-only afterwards. While it is being built (CandidateSetBuilder), every
accepted word feeds two counters per letter that hasn't been guessed yet:

  - count      : occurrences across all candidates ("APPLE" adds 2 to P)
  - word_count : candidates containing the letter at least once

When building finishes the letters are ranked once, best first:
  count desc, then word_count desc, then alphabetically.

Invariant behind `suggest`:
  Every candidate matches the pattern, so its letters at mystery positions are
  not guessed letters. While the set is non-empty and the pattern still has a
  blank, at least one unguessed letter is therefore in the ranking. Running out
  of suggestions means the secret word is not in the source words.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, Iterator, List, Tuple

from hangman_ai.engine.constraints import matches


class FrozenCandidateSetError(RuntimeError):
    """Raised when adding words to a builder that has already been built."""


class NoSuggestionError(LookupError):
    """Raised when the candidate set has nothing left to offer."""


@dataclass(frozen=True)
class LetterStat:
    letter: str
    count: int       # occurrences across all candidate words
    word_count: int  # candidate words containing the letter

    def rank_key(self) -> Tuple[int, int, str]:
        return (-self.count, -self.word_count, self.letter)


@dataclass(frozen=True)
class CandidateSet:
    pattern: str
    guessed_letters: FrozenSet[str]
    words: Tuple[str, ...]
    ranking: Tuple[LetterStat, ...]

    @classmethod
    def build(cls, pattern: str, guessed_letters: AbstractSet[str],
              source_words: Iterable[str]) -> "CandidateSet":
        """
        Filter `source_words` against `pattern`/`guessed_letters` and freeze.

        Non-matching words are dropped silently; feeding a set its own words
        again with the same inputs gives an equal set.
        """
        builder = CandidateSetBuilder(pattern, guessed_letters)
        for w in source_words:
            builder.add(w)
        return builder.build()

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def built_for(self, pattern: str, guessed_letters: AbstractSet[str]) -> bool:
        """True if this set was built from exactly this observable state."""
        return pattern == self.pattern and frozenset(guessed_letters) == self.guessed_letters

    def first(self) -> str:
        if not self.words:
            raise NoSuggestionError(f"no candidate words left for pattern {self.pattern!r}")
        return self.words[0]

    def suggest(self, excluded: AbstractSet[str]) -> str:
        """
        Most probable letter not in `excluded`.

        Pure in `excluded`: the ranking never changes after build.
        """
        for stat in self.ranking:
            if stat.letter not in excluded:
                return stat.letter
        raise NoSuggestionError(
            f"no letter to suggest for pattern {self.pattern!r} "
            f"({len(self.words)} candidates, excluded={sorted(excluded)})")

    def __str__(self) -> str:
        return f"CandidateSet[{len(self.words)}]"


class CandidateSetBuilder:
    """
    Append-only construction phase of a CandidateSet.

    `add` may be called any number of times until `build`; after that the
    builder is frozen and `add` raises FrozenCandidateSetError.
    """

    def __init__(self, pattern: str, guessed_letters: AbstractSet[str]):
        self.pattern = pattern
        self.guessed_letters: FrozenSet[str] = frozenset(guessed_letters)
        self._words: List[str] = []
        self._counts: Counter[str] = Counter()
        self._word_counts: Counter[str] = Counter()
        self._frozen = False

    def add(self, word: str) -> bool:
        """
        Accept `word` if it matches; update letter stats.

        Returns:
            True if the word was accepted, False if it was dropped.
        """
        if self._frozen:
            raise FrozenCandidateSetError("CandidateSet is already built")
        if not matches(self.pattern, word, self.guessed_letters):
            return False

        unguessed = [ch for ch in word if ch not in self.guessed_letters]
        self._counts.update(unguessed)
        self._word_counts.update(set(unguessed))  # once per word
        self._words.append(word)
        return True

    def build(self) -> CandidateSet:
        if self._frozen:
            raise FrozenCandidateSetError("CandidateSet is already built")
        self._frozen = True
        stats = [LetterStat(ch, n, self._word_counts[ch]) for ch, n in self._counts.items()]
        ranking = sorted(stats, key=LetterStat.rank_key)
        return CandidateSet(
            pattern=self.pattern,
            guessed_letters=self.guessed_letters,
            words=tuple(self._words),
            ranking=tuple(ranking),
        )
