"""Strategies driven by a human at the prompt."""

from __future__ import annotations

import logging
from enum import Enum

from ..interactive import Output, Prompt, ask_yes_no, read_guess
from ..strategy import GameConfig, Strategy
from ..wordle_env import WordList
from ..words import Score, Word, format_score
from .minimax_strat import MinimaxStrategy

log = logging.getLogger(__name__)


class HumanGuesser(Strategy):
    """Read every guess from the prompt."""

    interactive = True

    def __init__(self, prompt: Prompt = input, out: Output = print) -> None:
        self._prompt = prompt
        self._out = out
        self._legal: WordList | None = None

    @property
    def name(self) -> str:
        return "Human"

    def begin_game(self, config: GameConfig) -> None:
        self._legal = WordList(config.vocabulary, config.word_length)

    def guess(self) -> Word:
        if self._legal is None:
            raise RuntimeError("Call begin_game() first")
        return read_guess(self._legal.word_length, self._legal, self._prompt, self._out)

    def receive_score(self, score: Score) -> None:
        self._out(f"Score was {format_score(score)}")


class HumanMode(Enum):
    HUMAN = "human"
    SOLVER = "solver"


class HumanThenSolver(Strategy):
    """Let a human guess until they hand the game over to the solver.

    Before each human guess the player is asked whether the solver should
    take over. :meth:`start_solver` is the only way from ``HUMAN`` to
    ``SOLVER``; the solver then continues with the candidates left by the
    human's guesses.
    """

    interactive = True

    def __init__(
        self,
        prompt: Prompt = input,
        out: Output = print,
        solver: MinimaxStrategy | None = None,
    ) -> None:
        self._prompt = prompt
        self._out = out
        self._human = HumanGuesser(prompt, out)
        self._solver = solver if solver is not None else MinimaxStrategy()
        self._mode = HumanMode.HUMAN
        self._config: GameConfig | None = None
        self._candidates: WordList | None = None

    @property
    def name(self) -> str:
        return "HumanThenSolver"

    @property
    def mode(self) -> HumanMode:
        return self._mode

    @property
    def candidates(self) -> WordList:
        if self._mode is HumanMode.SOLVER:
            return self._solver.candidates
        if self._candidates is None:
            raise RuntimeError("Call begin_game() first")
        return self._candidates

    def begin_game(self, config: GameConfig) -> None:
        self._config = config
        self._human.begin_game(config)
        self._candidates = WordList(config.vocabulary, config.word_length)
        self._mode = HumanMode.HUMAN
        self._num_guesses = 0
        self._last_guess: Word | None = None

    def start_solver(self) -> None:
        if self._config is None:
            raise RuntimeError("Call begin_game() first")
        if self._mode is HumanMode.SOLVER:
            raise RuntimeError("solver already started")
        self._solver.begin_game(self._config)
        self._solver.take_over(self._candidates, self._num_guesses)
        self._mode = HumanMode.SOLVER
        log.info(
            "solver takes over after %d guesses with %d candidates",
            self._num_guesses, len(self._candidates),
        )

    def _should_switch_to_solver(self) -> bool:
        if self._mode is HumanMode.SOLVER:
            return False
        return ask_yes_no(
            f"There are {len(self._candidates)} viable words remaining.\n"
            "Do you want to let the solver take over? [y/n]",
            self._prompt,
            self._out,
        )

    def guess(self) -> Word:
        if self._should_switch_to_solver():
            self.start_solver()

        if self._mode is HumanMode.SOLVER:
            self._out("Computing...")
            word = self._solver.guess()
            self._out(f"Solver guesses {word}")
            return word

        word = self._human.guess()
        self._last_guess = word
        self._num_guesses += 1
        return word

    def receive_score(self, score: Score) -> None:
        if self._mode is HumanMode.SOLVER:
            self._solver.receive_score(score)
            return
        if self._last_guess is None:
            raise RuntimeError("receive_score() called before guess()")
        self._candidates.narrow(self._last_guess, score)
        self._human.receive_score(score)
