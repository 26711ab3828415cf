import random

import pytest

from wordle_solve.errors import NotInWordList, TooManyGuesses, WordLengthError
from wordle_solve.wordle_env import (
    GameState,
    WordList,
    WordleEnv,
    evaluate,
    filter_candidates,
    run_game,
    score_guess,
)
from wordle_solve.words import Word

from conftest import L, P, W, ScriptedStrategy


@pytest.mark.parametrize("secret,guess,expected", [
    ("aaa", "xxx", (W, W, W)),
    ("xxx", "xxx", (P, P, P)),
    ("cab", "abc", (L, L, L)),
    ("cba", "abc", (L, P, L)),
    ("aaa", "aab", (P, P, W)),
    ("xxx", "yyx", (W, W, P)),
    ("yyx", "xxx", (W, W, P)),
    ("yyx", "xyy", (L, P, L)),
    # Only as many yellows as unclaimed copies in the secret
    ("level", "belle", (W, P, L, L, L)),
    ("crane", "eerie", (W, W, L, W, P)),
])
def test_evaluate_repeated_letters(secret, guess, expected):
    assert evaluate(Word(secret), Word(guess)) == expected


def test_evaluate_self_is_all_right_place(bundled):
    for w in list(bundled.words)[:200]:
        assert evaluate(w, w) == (P,) * 5


def test_evaluate_disjoint_letters_is_all_wrong():
    a, b = Word("favor"), Word("unlit")
    assert evaluate(a, b) == (W,) * 5
    assert evaluate(b, a) == (W,) * 5


def test_evaluate_length_mismatch():
    with pytest.raises(WordLengthError):
        evaluate(Word("abc"), Word("abcd"))


def test_score_guess_checks_membership(small_dictionary):
    with pytest.raises(NotInWordList) as exc:
        score_guess(Word("favor"), Word("zzzzz"), small_dictionary)
    assert exc.value.word == Word("zzzzz")
    assert score_guess(Word("favor"), Word("favor"), small_dictionary) == (P,) * 5


def test_word_list_keeps_order_and_drops_duplicates():
    wl = WordList(["bbb", "aaa", "bbb", Word("ccc")], 3)
    assert [str(w) for w in wl] == ["bbb", "aaa", "ccc"]
    assert Word("aaa") in wl and "aaa" not in wl
    assert wl[2] == Word("ccc")


def test_word_list_rejects_wrong_length():
    with pytest.raises(WordLengthError):
        WordList(["abc", "abcd"], 3)
    with pytest.raises(WordLengthError):
        WordList([Word("abcd")], 3)


def test_narrow_shrinks_keeps_secret_and_is_idempotent(bundled):
    secret = Word("favor")
    candidates = bundled.words.copy()
    sizes = [len(candidates)]
    for g in ["arose", "unlit", "major"]:
        guess = Word(g)
        observed = evaluate(secret, guess)
        candidates.narrow(guess, observed)
        assert len(candidates) <= sizes[-1]
        assert secret in candidates
        sizes.append(len(candidates))

        before = list(candidates)
        assert candidates.narrow(guess, observed) == 0
        assert list(candidates) == before
    # The reference dictionary is untouched
    assert len(bundled.words) == sizes[0]


def test_filter_candidates_does_not_mutate(small_dictionary):
    words = list(small_dictionary)
    kept = filter_candidates(words, Word("cigar"), evaluate(Word("favor"), Word("cigar")))
    assert Word("favor") in kept and Word("cigar") not in kept
    assert words == list(small_dictionary)


def test_env_win(small_dictionary):
    env = WordleEnv(small_dictionary, max_guesses=6)
    env.reset(secret="favor")
    assert env.guess("cigar") != (P,) * 5
    assert env.state is GameState.AWAITING_GUESS
    assert env.guess(Word("favor")) == (P,) * 5
    assert env.state is GameState.WON
    assert env.is_solved() and env.game_over()
    assert env.secret == Word("favor")


def test_env_loss_at_cap(small_dictionary):
    env = WordleEnv(small_dictionary, max_guesses=2)
    env.reset(secret="favor")
    env.guess("cigar")
    with pytest.raises(RuntimeError):
        env.secret
    env.guess("rebut")
    assert env.state is GameState.LOST
    assert env.remaining_guesses() == 0
    assert not env.is_solved()


@pytest.mark.parametrize("moves", [["favor"], ["cigar", "rebut"]])
def test_env_rejects_guesses_after_game_over(small_dictionary, moves):
    env = WordleEnv(small_dictionary, max_guesses=2)
    env.reset(secret="favor")
    for m in moves:
        env.guess(m)
    history = env.history
    with pytest.raises(TooManyGuesses):
        env.guess("favor")
    assert env.history == history


def test_env_illegal_guess_changes_nothing(small_dictionary):
    env = WordleEnv(small_dictionary, max_guesses=2)
    env.reset(secret="favor")
    with pytest.raises(NotInWordList):
        env.guess("zzzzz")
    assert env.history == []
    assert env.remaining_guesses() == 2
    assert env.state is GameState.AWAITING_GUESS


def test_env_requires_reset_and_known_secret(small_dictionary):
    env = WordleEnv(small_dictionary)
    with pytest.raises(RuntimeError):
        env.guess("favor")
    with pytest.raises(ValueError):
        env.reset(secret="zzzzz")
    env.reset(rng=random.Random(3))
    env.guess("favor")  # any legal word is accepted
    assert len(env.history) == 1


def test_env_validates_arguments(small_dictionary):
    with pytest.raises(ValueError):
        WordleEnv(small_dictionary, max_guesses=0)
    with pytest.raises(ValueError):
        WordleEnv(WordList([], 5))


def test_run_game_feeds_back_only_while_playing(small_dictionary):
    env = WordleEnv(small_dictionary, max_guesses=6)
    env.reset(secret="favor")
    strat = ScriptedStrategy(["cigar", "rebut", "favor"])
    assert run_game(env, strat) is True
    assert len(strat.scores) == 2
    assert [str(w) for w, _ in env.history] == ["cigar", "rebut", "favor"]


def test_run_game_lost(small_dictionary):
    env = WordleEnv(small_dictionary, max_guesses=2)
    env.reset(secret="favor")
    strat = ScriptedStrategy(["cigar", "rebut"])
    assert run_game(env, strat) is False
    assert len(strat.scores) == 1


def test_run_game_stops_on_illegal_guess(small_dictionary):
    env = WordleEnv(small_dictionary, max_guesses=6)
    env.reset(secret="favor")
    with pytest.raises(NotInWordList):
        run_game(env, ScriptedStrategy(["zzzzz"]))
    assert env.history == []
