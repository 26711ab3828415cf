"""Text input from a human player.

Malformed input is answered with a re-prompt and never leaves this module.
Prompt and output callables default to ``input`` and ``print`` and can be
replaced (e.g. by scripted answers in tests).
"""

from __future__ import annotations

from typing import Callable

from .errors import WordLengthError
from .wordle_env import BaseEnv, WordList
from .words import LetterOutcome, Score, Word, format_score

Prompt = Callable[[str], str]
Output = Callable[[str], None]

_OUTCOME_CHARS = {
    "g": LetterOutcome.RIGHT_PLACE,
    "y": LetterOutcome.RIGHT_LETTER,
    "b": LetterOutcome.WRONG,
}


def parse_guess(text: str, length: int) -> Word | None:
    """Keep the letters of *text*, lower-cased; None unless exactly *length*."""
    if not text.isascii():
        return None
    letters = "".join(c for c in text.lower() if "a" <= c <= "z")
    if len(letters) != length:
        return None
    return Word(letters)


def parse_score(text: str, length: int) -> Score | None:
    """Read g/y/b characters (any case) as outcomes, ignoring everything else."""
    outcomes = tuple(_OUTCOME_CHARS[c] for c in text.lower() if c in _OUTCOME_CHARS)
    if len(outcomes) != length:
        return None
    return outcomes


def read_guess(
    length: int,
    legal: WordList | None = None,
    prompt: Prompt = input,
    out: Output = print,
) -> Word:
    out("Enter guess:")
    while True:
        word = parse_guess(prompt("> "), length)
        if word is None:
            out(f"Not a valid guess, expected {length} letters. Try again:")
        elif legal is not None and word not in legal:
            out(f"{word} is not in the word list. Try again:")
        else:
            return word


def read_score(
    guess: Word,
    prompt: Prompt = input,
    out: Output = print,
) -> Score:
    out(f"Enter score for {guess} (g = right place, y = right letter, b = wrong):")
    while True:
        score = parse_score(prompt("> "), len(guess))
        if score is not None:
            return score
        out(f"Invalid score, expected {len(guess)} of g/y/b. Try again:")


def ask_yes_no(question: str, prompt: Prompt = input, out: Output = print) -> bool:
    out(question)
    while True:
        answer = prompt("> ").strip().lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        out("Please answer y or n:")


class OracleEnv(BaseEnv):
    """A game whose scores are reported by a human.

    Used to play along with a Wordle game running elsewhere: the human types
    the colours shown for each suggested guess.
    """

    def __init__(
        self,
        word_length: int,
        max_guesses: int = 6,
        prompt: Prompt = input,
        out: Output = print,
    ) -> None:
        super().__init__(word_length, max_guesses)
        self._prompt = prompt
        self._out = out

    def guess(self, word: Word) -> Score:
        self._check_open()
        if len(word) != self._word_length:
            raise WordLengthError(
                f"{word} has {len(word)} letters, expected {self._word_length}"
            )
        pat = read_score(word, self._prompt, self._out)
        self._record(word, pat)
        self._out(f"  {word}  {format_score(pat)}")
        return pat
