"""Minimax strategy: maximise the number of candidates a guess is sure to eliminate.

After one or two fixed openers, every guess is scored by its worst case over
all secrets still possible, and the best worst case wins. Guesses are drawn
from the whole dictionary so that words which cannot be the secret are
allowed; once a single candidate is left, or on the last allowed attempt, only
candidates are considered.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from ..errors import EmptyCandidateSet
from ..strategy import GameConfig, Strategy
from ..wordle_env import WordList, evaluate
from ..words import LetterOutcome, Score, Word, encode_score

log = logging.getLogger(__name__)


def worst_case_eliminations(guess: Word, candidates: WordList) -> int:
    """Return how many candidates *guess* eliminates for sure.

    For each possible secret ``s``, count the candidates whose score under
    *guess* differs from the score of ``s``; the result is the minimum of that
    count over all ``s``. A candidate equal to *guess* is not counted.

    Candidates sharing a score form one bucket, so the minimum is reached at
    the largest bucket.
    """
    n = len(candidates)
    if n == 0:
        raise EmptyCandidateSet("no candidate words left to score guesses against")
    codes = np.fromiter(
        (encode_score(evaluate(c, guess)) for c in candidates),
        dtype=np.int64,
        count=n,
    )
    _, counts = np.unique(codes, return_counts=True)
    worst = n - int(counts.max())
    # The guess is always in a bucket of its own, so it is counted for every
    # other secret.
    if n > 1 and guess in candidates:
        worst -= 1
    return worst


class MinimaxStrategy(Strategy):
    """Play fixed openers, then the guess with the best guaranteed elimination.

    Ties go to candidate words first, then to the lexicographically smallest.
    Default openers that are not in a game's dictionary are skipped.
    """

    #: Openers played before any scoring, in order.
    default_openers: tuple[str, ...] = ("arose",)

    def __init__(self, openers: Sequence[str] | None = None) -> None:
        # Explicit openers must fit the game; defaults that do not are dropped.
        self._strict_openers = openers is not None
        self._opener_tokens = tuple(openers if openers is not None else self.default_openers)
        self._dictionary: WordList | None = None
        self._candidates: WordList | None = None

    @property
    def name(self) -> str:
        return "Minimax"

    def begin_game(self, config: GameConfig) -> None:
        self._dictionary = WordList(config.vocabulary, config.word_length)
        self._openers = self._fit_openers(config.word_length)
        self._candidates = self._dictionary.copy()
        self._max_guesses = config.max_guesses
        self._num_guesses = 0
        self._last_guess: Word | None = None
        # Letters confirmed at their right place so far
        self.right_place: set[str] = set()

    def _fit_openers(self, word_length: int) -> tuple[Word, ...]:
        if self._strict_openers:
            openers = tuple(Word.parse(o, word_length) for o in self._opener_tokens)
            missing = [str(o) for o in openers if o not in self._dictionary]
            if missing:
                raise ValueError(f"openers not in the dictionary: {missing}")
            return openers
        fitting = tuple(
            Word(o) for o in self._opener_tokens
            if len(o) == word_length and Word(o) in self._dictionary
        )
        if len(fitting) < len(self._opener_tokens):
            log.warning(
                "default openers %s do not fit this %d-letter dictionary, playing %s",
                list(self._opener_tokens), word_length, [str(o) for o in fitting],
            )
        return fitting

    def take_over(self, candidates: Iterable[Word], guesses_made: int) -> None:
        """Continue a game someone else started.

        Openers already covered by *guesses_made* are skipped.
        """
        if self._dictionary is None:
            raise RuntimeError("Call begin_game() before take_over()")
        self._candidates = WordList(candidates, self._dictionary.word_length)
        self._num_guesses = guesses_made
        self._last_guess = None

    @property
    def candidates(self) -> WordList:
        if self._candidates is None:
            raise RuntimeError("Call begin_game() first")
        return self._candidates

    @property
    def num_guesses(self) -> int:
        return self._num_guesses

    def guess(self) -> Word:
        candidates = self.candidates
        if not candidates:
            raise EmptyCandidateSet(
                f"no candidate word fits the scores after {self._num_guesses} guesses"
            )
        # No more probing once one candidate is left or this is the last attempt
        must_hit = len(candidates) == 1 or self._num_guesses >= self._max_guesses - 1
        if self._num_guesses < len(self._openers) and not must_hit:
            word = self._openers[self._num_guesses]
        else:
            source = candidates if must_hit else self._dictionary
            word, score = self._best_guess(source)
            log.debug(
                "guess %d: %s eliminates at least %d of %d candidates",
                self._num_guesses + 1, word, score, len(candidates),
            )

        self._last_guess = word
        self._num_guesses += 1
        return word

    def _best_guess(self, source: WordList) -> tuple[Word, int]:
        best: Word | None = None
        best_key: tuple[int, bool] = (-1, False)
        for w in source:
            # Equal scores: a word that may be the secret wins
            key = (worst_case_eliminations(w, self._candidates), w in self._candidates)
            if key > best_key or (key == best_key and w.letters < best.letters):
                best, best_key = w, key
        return best, best_key[0]

    def receive_score(self, score: Score) -> None:
        if self._last_guess is None:
            raise RuntimeError("receive_score() called before guess()")
        guess = self._last_guess
        for c, o in zip(guess, score):
            if o == LetterOutcome.RIGHT_PLACE:
                self.right_place.add(c)
        removed = self.candidates.narrow(guess, score)
        log.debug(
            "%s scored, %d candidates removed, %d left: %r",
            guess, removed, len(self._candidates), self._candidates,
        )


class TwoOpenerMinimaxStrategy(MinimaxStrategy):
    """Minimax with two fixed openers covering ten distinct letters."""

    default_openers = ("arose", "unlit")

    @property
    def name(self) -> str:
        return "MinimaxTwoOpeners"
