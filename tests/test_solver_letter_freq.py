import pytest
from hangman_ai.engine import HangmanGame, GuessLetter, GuessWord
from hangman_ai.harness import run_case
from hangman_ai.solvers import create_solver, NoSuggestionError
from hangman_ai.solvers.base import effective_excluded
from hangman_ai.solvers.letter_freq import LetterFreqSolver


def test_apple_game_plays_expected_sequence():
    solver = create_solver("letter_freq")
    r = run_case(solver, "apple", dictionary=["APPLE", "ANGLE", "ANKLE"], max_wrong_guesses=5)
    assert r["success"] is True
    assert r["guesses"] == [
        "GuessLetter[A]", "GuessLetter[E]", "GuessLetter[L]",
        "GuessLetter[N]", "GuessWord[APPLE]",
    ]
    assert r["score"] == 4  # one wrong letter + three correct letters


def test_apple_first_turns_keep_all_candidates():
    game = HangmanGame("APPLE", 5)
    solver = LetterFreqSolver.for_game(game, ["APPLE", "ANGLE", "ANKLE"])
    assert len(solver.candidates) == 3

    g = solver.next_guess(game)
    assert g == GuessLetter("A")
    g.make_guess(game)
    assert game.guessed_so_far == "A----"

    g = solver.next_guess(game)
    assert len(solver.candidates) == 3
    assert isinstance(g, GuessLetter) and g.letter != "A"


def test_one_blank_guesses_whole_word():
    game = HangmanGame("CAT", 5)
    game.guess_letter("C")
    game.guess_letter("A")
    solver = LetterFreqSolver.for_game(game, ["CAT", "CAR"])

    # R and T tie on both counts; R wins alphabetically
    assert solver.next_guess(game) == GuessWord("CAR")


def test_failed_word_guess_feeds_exclusions_only():
    game = HangmanGame("CAT", 5)
    game.guess_letter("T")
    game.guess_word("BAT")
    assert game.guessed_so_far == "--T"

    assert effective_excluded(game.guessed_so_far, game.all_guessed_letters,
                              game.incorrectly_guessed_words) == {"T", "B"}

    solver = LetterFreqSolver.for_game(game, ["CAT", "BAT", "HAT", "COT"])
    g = solver.next_guess(game)
    assert "BAT" not in solver.candidates
    assert "B" not in {s.letter for s in solver.candidates.ranking}
    assert "B" not in game.all_guessed_letters
    assert g == GuessLetter("A")


def test_wrong_word_then_recovers():
    game = HangmanGame("CAT", 5)
    game.guess_letter("C")
    game.guess_letter("A")
    solver = LetterFreqSolver.for_game(game, ["CAT", "CAR"])
    solver.next_guess(game).make_guess(game)  # CAR, wrong
    assert game.incorrectly_guessed_words == {"CAR"}
    assert solver.next_guess(game) == GuessWord("CAT")
    assert game.all_guessed_letters == {"C", "A"}


def test_single_candidate_is_guessed_as_word():
    game = HangmanGame("CAT", 5)
    solver = LetterFreqSolver.for_game(game, ["CAT", "DOGS"])
    assert solver.next_guess(game) == GuessWord("CAT")


def test_last_chance_guesses_first_candidate():
    game = HangmanGame("CUT", 1)
    game.guess_letter("Z")
    assert game.num_wrong_guesses_remaining == 0
    solver = LetterFreqSolver.for_game(game, ["CAT", "COT", "CUT"])
    assert solver.next_guess(game) == GuessWord("CAT")


def test_candidate_set_reused_when_nothing_changed():
    game = HangmanGame("APPLE", 5)
    solver = LetterFreqSolver.for_game(game, ["APPLE", "ANGLE", "ANKLE"])
    solver.next_guess(game)
    held = solver.candidates
    solver.next_guess(game)
    assert solver.candidates is held


WORDS = ["CAT", "COT", "CUT", "CAR", "BAT", "HAT", "HOT", "DOG", "DIG", "BIG", "BAG", "RAG"]


@pytest.mark.parametrize("secret", WORDS)
def test_candidates_shrink_and_letters_never_repeat(secret):
    game = HangmanGame(secret, 5)
    solver = LetterFreqSolver.for_game(game, WORDS)
    sizes = []
    letters = []
    while game.game_status is HangmanGame.Status.KEEP_GUESSING:
        g = solver.next_guess(game)
        sizes.append(len(solver.candidates))
        if isinstance(g, GuessLetter):
            assert g.letter not in game.all_guessed_letters
            letters.append(g.letter)
        g.make_guess(game)
    assert sizes == sorted(sizes, reverse=True)
    assert len(letters) == len(set(letters))
    assert game.game_status is HangmanGame.Status.GAME_WON


def test_secret_missing_from_dictionary_fails_loudly():
    solver = create_solver("letter_freq")
    with pytest.raises(NoSuggestionError):
        run_case(solver, "COW", dictionary=["DOG", "CAT"], max_wrong_guesses=5)


def test_str_shows_candidate_count():
    game = HangmanGame("APPLE", 5)
    solver = LetterFreqSolver.for_game(game, ["APPLE", "ANGLE", "ANKLE", "CAT"])
    assert str(solver) == "LetterFreqSolver[CandidateSet[3]]"


def test_repeated_dictionary_words_count_once():
    game = HangmanGame("CAT", 5)
    solver = LetterFreqSolver.for_game(game, ["CAT", "cat", " Cat ", "DOGS"])
    assert list(solver.candidates) == ["CAT"]
    assert solver.next_guess(game) == GuessWord("CAT")


def test_repeated_words_do_not_skew_ranking():
    game = HangmanGame("COT", 5)
    once = LetterFreqSolver.for_game(game, ["CAT", "COT", "CUT"])
    twice = LetterFreqSolver.for_game(game, ["CAT", "CAT", "COT", "CUT"])
    assert twice.candidates.ranking == once.candidates.ranking


def test_describe_matches_str():
    game = HangmanGame("APPLE", 5)
    solver = LetterFreqSolver.for_game(game, ["APPLE", "ANGLE", "ANKLE"])
    assert solver.describe() == "LetterFreqSolver[CandidateSet[3]]"
    assert str(solver) == solver.describe()
