"""Exceptions raised by the game engine and the solver."""

from __future__ import annotations


class WordleError(Exception):
    """Base class for all game errors."""


class WordLengthError(WordleError, ValueError):
    """A token does not have the word length of the game."""


class NotInWordList(WordleError, ValueError):
    """A guess is not a member of the legal dictionary."""

    def __init__(self, word) -> None:
        super().__init__(f"{str(word)!r} is not in the word list")
        self.word = word


class TooManyGuesses(WordleError, RuntimeError):
    """A guess was submitted after the game was already over."""


class EmptyCandidateSet(WordleError, RuntimeError):
    """No candidate word is consistent with the scores seen so far.

    This means the scores fed to the solver do not come from any word in
    its dictionary; it is never recoverable.
    """
