from __future__ import annotations

import pytest

from wordle_solve.lexicon import load_lexicon
from wordle_solve.strategy import GameConfig, Strategy
from wordle_solve.wordle_env import WordList
from wordle_solve.words import LetterOutcome, Word

P = LetterOutcome.RIGHT_PLACE
L = LetterOutcome.RIGHT_LETTER
W = LetterOutcome.WRONG


@pytest.fixture(scope="session")
def bundled():
    return load_lexicon()


@pytest.fixture
def small_dictionary() -> WordList:
    return WordList(["cigar", "rebut", "sissy", "humph", "awake", "favor"], 5)


def config_for(words, word_length, max_guesses=6) -> GameConfig:
    return GameConfig(
        word_length=word_length,
        vocabulary=tuple(str(w) for w in words),
        max_guesses=max_guesses,
    )


def scripted(answers):
    """Prompt callable that replays *answers* in order."""
    it = iter(answers)
    return lambda _prompt="": next(it)


class ScriptedStrategy(Strategy):
    """Plays a fixed list of guesses and remembers every score it gets."""

    def __init__(self, guesses):
        self._guesses = [Word(g) for g in guesses]
        self.scores = []

    @property
    def name(self) -> str:
        return "Scripted"

    def guess(self) -> Word:
        return self._guesses.pop(0)

    def receive_score(self, score) -> None:
        self.scores.append(score)
