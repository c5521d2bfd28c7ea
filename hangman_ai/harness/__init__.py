from .core import run_case, run_batch, summarize, DEFAULT_MAX_WRONG_GUESSES
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "summarize", "DEFAULT_MAX_WRONG_GUESSES",
           "write_csv", "write_manifest"]
