"""Abstract base class for Wordle strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .words import Score, Word


@dataclass(frozen=True)
class GameConfig:
    """All information a strategy receives at the start of each game.

    Attributes
    ----------
    word_length : int
        Number of letters in each word.
    vocabulary : tuple[str, ...]
        All legal guesses for this game, in dictionary order (immutable).
        The secret word is always drawn from this set.
    max_guesses : int
        Maximum number of guesses allowed per game.
    """

    word_length: int
    vocabulary: tuple[str, ...]
    max_guesses: int = 6


class Strategy(ABC):
    """Interface that every Wordle strategy must implement.

    A strategy is stateful: the game loop calls :meth:`guess`, scores the
    word and hands the score back through :meth:`receive_score` while the
    game goes on.
    """

    #: Strategies that read from a prompt are left out of batch runs.
    interactive = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name (used in reports)."""
        ...

    def begin_game(self, config: GameConfig) -> None:
        """Called at the start of each game.

        The default implementation does nothing.
        """

    @abstractmethod
    def guess(self) -> Word:
        """Return the next guess."""
        ...

    @abstractmethod
    def receive_score(self, score: Score) -> None:
        """Receive the score of the last guess."""
        ...
