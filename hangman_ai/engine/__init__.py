from .scoring import MYSTERY_LETTER, LOST_GAME_SCORE, score
from .constraints import matches, filter_candidates
from .validation import normalize_letter, normalize_word
from .game import HangmanGame, Status, GameOverError
from .guesses import Guess, GuessLetter, GuessWord

__all__ = [
    "MYSTERY_LETTER", "LOST_GAME_SCORE", "score",
    "matches", "filter_candidates",
    "normalize_letter", "normalize_word",
    "HangmanGame", "Status", "GameOverError",
    "Guess", "GuessLetter", "GuessWord",
]
