# apps/cli/run.py
"""
CLI entry point for playing hangmanAI games.

This script:
  1) Validates and loads the dictionary (prints counts + SHA to stderr).
  2) Instantiates the requested solver.
  3) Reads secret words (stdin, one per line, or --words FILE), plays one game
     per word and prints "WORD = score" for each.
  4) Prints AVG / NUM / TOTAL over all games and, with --outdir, writes:
       - CSV:  per-game results + guess sequence
       - JSON: manifest with config, dictionary hash, summary, git commit

Configuration falls back to environment variables:
  hangman_dict     dictionary path            (default: words.txt)
  hangman_guesses  wrong guesses allowed      (default: 5)
  hangman_debug    trace every turn to stderr (set to anything)
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from tqdm import tqdm

from hangman_ai.datasets import validate_dictionary, pretty_summary, load_dictionary, read_lines
from hangman_ai.harness import run_case, summarize, DEFAULT_MAX_WRONG_GUESSES
from hangman_ai.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from hangman_ai.solvers import create_solver, get_solver_ids


def _env_guesses() -> int:
    raw = os.environ.get("hangman_guesses")
    if raw is None:
        return DEFAULT_MAX_WRONG_GUESSES
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"hangman_guesses must be an integer; got {raw!r}") from None


def _stdin_words() -> Iterator[str]:
    """Prompt on stderr and yield lines from stdin until EOF."""
    while True:
        sys.stderr.write("Enter a word:\n")
        sys.stderr.flush()
        line = sys.stdin.readline()
        if not line:
            return
        yield line


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="hangmanAI: play hangman games with a solver")
    ap.add_argument("--dict", default=os.environ.get("hangman_dict", "words.txt"),
                    help="path to the dictionary (one word per line; env: hangman_dict)")
    ap.add_argument("--guesses", type=int, default=None,
                    help="wrong guesses allowed per game (env: hangman_guesses; default 5)")
    ap.add_argument("--debug", action="store_true",
                    default=os.environ.get("hangman_debug") is not None,
                    help="trace every turn to stderr (env: hangman_debug)")
    ap.add_argument("--solver", default="letter_freq",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--words", help="read secret words from this file instead of stdin")
    ap.add_argument("--outdir", help="write run CSV + manifest into this directory")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show progress when reading --words (auto=bar on a terminal, else plain text)."
    )
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse CLI args, load the dictionary, play every word, print scores.
    Returns the process exit status.
    """
    args = _build_parser().parse_args(argv)

    guesses = args.guesses if args.guesses is not None else _env_guesses()
    if guesses < 1:
        guesses = DEFAULT_MAX_WRONG_GUESSES

    # 1) Validate + load dictionary
    try:
        rep = validate_dictionary(args.dict)
        dictionary = load_dictionary(args.dict)
    except (OSError, UnicodeDecodeError):
        sys.stderr.write(f"Error when reading dictionary file '{args.dict}'!\n")
        return 1
    sys.stderr.write(pretty_summary(rep) + "\n")

    # 2) Solver by id (registry populated by importing hangman_ai.solvers)
    solver = create_solver(args.solver)

    # 3) Word source + progress mode
    if args.words:
        try:
            secrets: List[str] = [w for w in read_lines(args.words) if w.strip()]
        except (OSError, UnicodeDecodeError):
            sys.stderr.write(f"Error when reading words file '{args.words}'!\n")
            return 1
        mode = "off" if args.debug else _progress_mode(args.progress)
        source = tqdm(secrets, ncols=80, desc="Playing", unit="game",
                      file=sys.stderr) if mode == "bar" else secrets
        total = len(secrets)
    else:
        source, mode, total = _stdin_words(), "off", 0

    results: List[Dict] = []
    start = time.time()
    last_print = 0.0

    # 4) Play
    for idx, raw in enumerate(source, 1):
        word = raw.strip().upper()
        if not word:
            continue
        if word not in dictionary:
            sys.stderr.write(f"Word '{word}' is not in dictionary!\n")
            continue

        if args.debug:
            sys.stderr.write(f"New Game [{word}]\n")

        r = run_case(solver, word, dictionary=dictionary, max_wrong_guesses=guesses,
                     seed=args.seed + idx, debug=args.debug)
        r["solver_id"] = solver.id
        results.append(r)
        print(f"{word} = {r['score']}", flush=True)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Summary
    summary = summarize(results)
    if results:
        print("-----------------------------")
        print(f"AVG: {summary['avg']:.15g}")
        print(f"NUM: {summary['num']}")
        print(f"TOTAL: {summary['total']}")

    # 6) Optional outputs (CSV + manifest)
    if args.outdir and results:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)

        csv_path = outdir / f"run_{run_id}.csv"
        manifest_path = outdir / f"run_{run_id}_manifest.json"

        write_csv(results, str(csv_path))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": dict(vars(args), guesses=guesses),
            "dictionary": rep,
            "summary": summary,
            "solver_id": solver.id,
        }
        write_manifest(manifest, str(manifest_path))

        sys.stderr.write(f"Wrote: {csv_path}\n")
        sys.stderr.write(f"Wrote: {manifest_path}\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
