"""
Experiment harness core primitives.

- run_case:  play a single game (one secret word) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- summarize: aggregate scores of a batch (avg/median/max, win rate).

The turn loop lives here: ask the solver for a guess, apply it to the game,
repeat until the game is won or lost. Solvers never see the secret word.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import sys
import time
from typing import Dict, Iterable, List

import numpy as np

from hangman_ai.engine import HangmanGame, Status

# Wrong guesses allowed per game unless configured otherwise.
DEFAULT_MAX_WRONG_GUESSES = 5


def _assert_max_wrong(max_wrong_guesses: int) -> None:
    """Guardrail: a game needs at least one wrong guess to be playable."""
    if max_wrong_guesses < 1:
        raise ValueError(f"max_wrong_guesses must be >= 1; got {max_wrong_guesses}")


def _trace(msg: str) -> None:
    sys.stderr.write(msg + "\n")


def run_case(
        solver,
        secret: str,
        *,
        dictionary: Iterable[str],
        max_wrong_guesses: int = DEFAULT_MAX_WRONG_GUESSES,
        seed: int | None = None,
        debug: bool = False,
) -> Dict:
    """
    Play one game until it is won or lost.

    Args:
        solver:            an object implementing BaseSolver with next_guess(game)
        secret:            the hidden word for this case
        dictionary:        the words the solver may consider
        max_wrong_guesses: wrong guesses allowed before the game is lost
        seed:              RNG seed to make solver tie-breaks reproducible
        debug:             trace game, guesses and solver state to stderr

    Returns:
        dict with keys:
            secret (str), success (bool), status (str), score (int),
            wrong_guesses (int), num_guesses (int), guesses (list[str]),
            time_ms (float)
    """
    _assert_max_wrong(max_wrong_guesses)

    game = HangmanGame(secret, max_wrong_guesses)
    solver.reset(dictionary=dictionary, N=game.secret_word_length, seed=seed)

    guesses: List[str] = []
    total_ms = 0.0

    while game.game_status is Status.KEEP_GUESSING:
        if debug:
            _trace(str(game))

        t0 = time.perf_counter_ns()
        guess = solver.next_guess(game)
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        if debug:
            _trace(str(guess))
            _trace(str(solver))

        guess.make_guess(game)
        guesses.append(str(guess))

    if debug:
        _trace(str(game))

    status = game.game_status
    return {
        "secret": secret.strip().upper(),
        "success": status is Status.GAME_WON,
        "status": status.value,
        "score": game.current_score,
        "wrong_guesses": game.num_wrong_guesses_made,
        "num_guesses": len(guesses),
        "guesses": guesses,
        "time_ms": total_ms,
    }


def run_batch(
        solver,
        secrets: List[str],
        *,
        dictionary: Iterable[str],
        max_wrong_guesses: int = DEFAULT_MAX_WRONG_GUESSES,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_max_wrong(max_wrong_guesses)

    words = list(dictionary)
    pool = secrets[:sample] if sample is not None else list(secrets)

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(
            solver, secret, dictionary=words,
            max_wrong_guesses=max_wrong_guesses, seed=case_seed
        )
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: num, total, avg, median, max score and win rate.
    An empty batch gives num=0 and zeros elsewhere.
    """
    if not results:
        return {"num": 0, "total": 0, "avg": 0.0, "median": 0.0, "max": 0, "win_rate": 0.0}

    scores = np.asarray([r["score"] for r in results], dtype=float)
    wins = np.asarray([bool(r["success"]) for r in results], dtype=float)
    return {
        "num": int(scores.size),
        "total": int(scores.sum()),
        "avg": float(scores.mean()),
        "median": float(np.median(scores)),
        "max": int(scores.max()),
        "win_rate": float(wins.mean()),
    }
