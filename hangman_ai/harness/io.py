"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- The guess sequence is stored in one column, space-separated, e.g.
  "GuessLetter[E] GuessLetter[A] GuessWord[CRANE]".
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["solver", "secret", "success", "status", "score",
          "wrong_guesses", "num_guesses", "time_ms", "guesses"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, secret, success, status, score, wrong_guesses, num_guesses,
      time_ms, guesses

    Args:
      results  : list of dicts returned by the harness per game.
      path     : output CSV path.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "solver": r.get("solver_id", "?"),
                "secret": r["secret"],
                "success": r["success"],
                "status": r["status"],
                "score": r["score"],
                "wrong_guesses": r["wrong_guesses"],
                "num_guesses": r["num_guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "guesses": " ".join(r.get("guesses", [])),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, dict, guesses, seed, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
