import pytest
from hangman_ai.engine import (
    HangmanGame, Status, GameOverError, GuessLetter, GuessWord,
    matches, filter_candidates, normalize_letter, normalize_word, score,
)

# --- pattern matching golden tests ---
@pytest.mark.parametrize("pattern,word,guessed,expected", [
    ("C-T", "COT", {"A"}, True),
    ("C-T", "CAT", {"A"}, False),   # 'A' guessed, so it can't hide in a blank
    ("C-T", "CUTE", set(), False),  # length mismatch
    ("---", "CAT", set(), True),
    ("---", "CAT", {"T"}, False),
    ("C--", "DOG", set(), False),
    ("A--LE", "APPLE", {"A", "E", "L"}, True),
    ("A--LE", "ANGLE", {"A", "E", "L", "N"}, False),
])
def test_matches_golden(pattern, word, guessed, expected):
    assert matches(pattern, word, guessed) is expected

def test_filter_candidates_drops_guessed_letter_in_blank():
    cand = filter_candidates(["CAT", "COT", "CUT"], "C-T", {"A"})
    assert cand == ["COT", "CUT"]

def test_normalize():
    assert normalize_letter(" e ") == "E"
    assert normalize_word("apple", N=5) == "APPLE"
    with pytest.raises(ValueError):
        normalize_letter("ab")
    with pytest.raises(ValueError):
        normalize_letter("1")
    with pytest.raises(ValueError):
        normalize_word("app1e")
    with pytest.raises(ValueError):
        normalize_word("apple", N=6)

def test_score_rule():
    assert score(1, 3, lost=False) == 4
    assert score(6, 2, lost=True) == 25

# --- game state ---
def test_game_letter_and_word_guesses():
    game = HangmanGame("apple", 5)
    assert game.guessed_so_far == "-----"
    assert game.guess_letter("p") == "-PP--"
    assert game.guess_letter("z") == "-PP--"
    assert game.correctly_guessed_letters == {"P"}
    assert game.incorrectly_guessed_letters == {"Z"}
    assert game.current_score == 2

    assert game.guess_word("angle") == "-PP--"
    assert game.incorrectly_guessed_words == {"ANGLE"}
    assert game.num_wrong_guesses_made == 2
    assert game.num_wrong_guesses_remaining == 3
    assert game.current_score == 3

    assert game.guess_word("apple") == "APPLE"
    assert game.game_status is Status.GAME_WON
    assert game.current_score == 3  # 2 wrong + 1 correct letter

    with pytest.raises(GameOverError):
        game.guess_letter("a")

def test_game_lost_after_exceeding_max_wrong():
    game = HangmanGame("cat", 1)
    game.guess_letter("z")
    assert game.game_status is Status.KEEP_GUESSING
    assert game.num_wrong_guesses_remaining == 0
    game.guess_letter("y")
    assert game.game_status is Status.GAME_LOST
    assert game.current_score == 25
    with pytest.raises(GameOverError):
        game.guess_word("cat")

def test_game_observables_are_copies():
    game = HangmanGame("cat", 5)
    game.guess_letter("c")
    game.all_guessed_letters.add("Q")
    game.incorrectly_guessed_words.add("DOG")
    assert game.all_guessed_letters == {"C"}
    assert game.incorrectly_guessed_words == set()

def test_game_str():
    game = HangmanGame("cat", 5)
    game.guess_letter("c")
    game.guess_letter("t")
    assert str(game) == "C-T; score=2; status=KEEP_GUESSING"

def test_guess_values_apply_to_game():
    game = HangmanGame("cat", 5)
    assert GuessLetter("A").make_guess(game) == "-A-"
    assert str(GuessLetter("A")) == "GuessLetter[A]"
    assert GuessWord("CAT").make_guess(game) == "CAT"
    assert str(GuessWord("CAT")) == "GuessWord[CAT]"
