"""Wordle environment: scoring, candidate filtering and the game loop."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator

from .errors import NotInWordList, TooManyGuesses, WordLengthError
from .words import LetterOutcome, Score, Word, is_win

if TYPE_CHECKING:
    from .strategy import Strategy

log = logging.getLogger(__name__)


def evaluate(secret: Word, guess: Word) -> Score:
    """Return the score of *guess* against *secret*."""
    n = len(secret)
    if len(guess) != n:
        raise WordLengthError(
            f"guess length ({len(guess)}) != secret length ({n})"
        )

    pat = [LetterOutcome.WRONG] * n
    # Secret letters not consumed by an exact match
    remaining: dict[str, int] = {}

    # Pass 1 – greens
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            pat[i] = LetterOutcome.RIGHT_PLACE
        else:
            remaining[s] = remaining.get(s, 0) + 1

    # Pass 2 – yellows, left to right
    for i, g in enumerate(guess):
        if pat[i] is LetterOutcome.RIGHT_PLACE:
            continue
        if remaining.get(g, 0) > 0:
            pat[i] = LetterOutcome.RIGHT_LETTER
            remaining[g] -= 1

    return tuple(pat)


def score_guess(secret: Word, guess: Word, legal: WordList) -> Score:
    """Score *guess* against *secret* after checking it is a legal word."""
    if guess not in legal:
        raise NotInWordList(guess)
    return evaluate(secret, guess)


def filter_candidates(
    candidates: Iterable[Word],
    guess: Word,
    observed: Score,
) -> list[Word]:
    """Keep only candidates consistent with the *observed* score."""
    return [w for w in candidates if evaluate(w, guess) == observed]


class WordList:
    """Ordered set of words of one length.

    Iteration follows insertion order; duplicates are dropped.
    """

    def __init__(self, words: Iterable[Word | str], word_length: int) -> None:
        self._word_length = word_length
        self._words: list[Word] = []
        self._index: set[Word] = set()
        for w in words:
            if isinstance(w, str):
                w = Word.parse(w, word_length)
            elif len(w) != word_length:
                raise WordLengthError(
                    f"{str(w)!r} has {len(w)} letters, expected {word_length}"
                )
            if w not in self._index:
                self._index.add(w)
                self._words.append(w)

    @property
    def word_length(self) -> int:
        return self._word_length

    def copy(self) -> WordList:
        return WordList(self._words, self._word_length)

    def narrow(self, guess: Word, observed: Score) -> int:
        """Drop every word that would not score *observed* against *guess*.

        Returns the number of words removed.
        """
        before = len(self._words)
        self._words = filter_candidates(self._words, guess, observed)
        self._index = set(self._words)
        return before - len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> Word:
        return self._words[index]

    def __repr__(self) -> str:
        head = ", ".join(str(w) for w in self._words[:5])
        more = ", ..." if len(self._words) > 5 else ""
        return f"WordList({len(self._words)}: {head}{more})"


class GameState(Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    LOST = "lost"


class BaseEnv:
    """Round bookkeeping shared by every kind of game.

    Subclasses produce the score of a guess; this class enforces the guess
    cap and tracks the history and the game state.
    """

    def __init__(self, word_length: int, max_guesses: int) -> None:
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be positive, got {max_guesses}")
        self._word_length = word_length
        self._max_guesses = max_guesses
        self._history: list[tuple[Word, Score]] = []
        self._state = GameState.AWAITING_GUESS

    def _check_open(self) -> None:
        if self.game_over():
            raise TooManyGuesses(
                f"game is already {self._state.value} after {len(self._history)} guesses"
            )

    def _record(self, word: Word, pat: Score) -> None:
        self._history.append((word, pat))
        if is_win(pat):
            self._state = GameState.WON
        elif len(self._history) >= self._max_guesses:
            self._state = GameState.LOST

    @property
    def state(self) -> GameState:
        return self._state

    def is_solved(self) -> bool:
        return self._state is GameState.WON

    def remaining_guesses(self) -> int:
        return self._max_guesses - len(self._history)

    def game_over(self) -> bool:
        return self._state is not GameState.AWAITING_GUESS

    @property
    def history(self) -> list[tuple[Word, Score]]:
        return list(self._history)

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def max_guesses(self) -> int:
        return self._max_guesses


class WordleEnv(BaseEnv):
    """A single Wordle game against a secret word.

    Parameters
    ----------
    dictionary : WordList
        Legal guesses. The secret is always drawn from it.
    max_guesses : int
        Maximum allowed guesses before the game is lost.
    """

    def __init__(self, dictionary: WordList, max_guesses: int = 6) -> None:
        if not len(dictionary):
            raise ValueError("dictionary is empty")
        super().__init__(dictionary.word_length, max_guesses)
        self._dictionary = dictionary
        # Set by reset()
        self._secret: Word | None = None

    def reset(self, secret: Word | str | None = None, rng: random.Random | None = None) -> None:
        """Start a new game. Random secret if *secret* is None."""
        if secret is None:
            secret = (rng or random).choice(list(self._dictionary))
        elif isinstance(secret, str):
            secret = Word.parse(secret, self._word_length)
        if secret not in self._dictionary:
            raise ValueError(f"secret {str(secret)!r} is not in the dictionary")
        self._secret = secret
        self._history = []
        self._state = GameState.AWAITING_GUESS

    def guess(self, word: Word | str) -> Score:
        """Submit a guess and receive its score.

        Raises
        ------
        RuntimeError
            If ``reset()`` was never called.
        TooManyGuesses
            If the game is over (solved or out of guesses).
        NotInWordList
            If *word* is not in the dictionary. The game state is unchanged.
        """
        if self._secret is None:
            raise RuntimeError("Call reset() before guessing")
        self._check_open()
        if isinstance(word, str):
            word = Word.parse(word, self._word_length)
        pat = score_guess(self._secret, word, self._dictionary)
        self._record(word, pat)
        return pat

    @property
    def secret(self) -> Word:
        """Reveal the secret word (only after game over)."""
        if self._secret is None:
            raise RuntimeError("No game in progress")
        if not self.game_over():
            raise RuntimeError("Game is still in progress")
        return self._secret

    @property
    def dictionary(self) -> WordList:
        return self._dictionary


def run_game(env: BaseEnv, strategy: Strategy) -> bool:
    """Play *strategy* against *env* until the game is over.

    The score is only fed back to the strategy while the game goes on.
    Errors from the env or the strategy propagate and end the game.
    Returns True on a win.
    """
    while not env.game_over():
        word = strategy.guess()
        pat = env.guess(word)
        if not env.game_over():
            strategy.receive_score(pat)
    log.debug("game over after %d guesses, solved=%s", len(env.history), env.is_solved())
    return env.is_solved()
