"""Word and score primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from .errors import WordLengthError


class LetterOutcome(IntEnum):
    """Outcome of one guessed letter.

    The values follow the usual feedback encoding:
    2 = green (correct letter, correct position)
    1 = yellow (letter in the secret at a position not yet claimed)
    0 = gray  (letter contributes no further match)
    """

    WRONG = 0
    RIGHT_LETTER = 1
    RIGHT_PLACE = 2


# One outcome per guess position.
Score = tuple[LetterOutcome, ...]

_SCORE_CHARS = {
    LetterOutcome.RIGHT_PLACE: "g",
    LetterOutcome.RIGHT_LETTER: "y",
    LetterOutcome.WRONG: "b",
}


@dataclass(frozen=True)
class Word:
    """A fixed-length, lower-case sequence of letters."""

    letters: str

    @classmethod
    def parse(cls, token: str, length: int) -> Word:
        """Build a word from *token*, which must have exactly *length* letters."""
        letters = token.strip().lower()
        if len(letters) != length:
            raise WordLengthError(
                f"{token!r} has {len(letters)} letters, expected {length}"
            )
        return cls(letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, index: int) -> str:
        return self.letters[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __str__(self) -> str:
        return self.letters


def is_win(score: Score) -> bool:
    return all(o == LetterOutcome.RIGHT_PLACE for o in score)


def encode_score(score: Score) -> int:
    """Encode a score as a single integer (base 3) for fast bucketing."""
    val = 0
    for i, o in enumerate(score):
        val += int(o) * (3 ** i)
    return val


def format_score(score: Score) -> str:
    """Render a score with the g/y/b letters used at the prompt."""
    return "".join(_SCORE_CHARS[o] for o in score)
