"""Word-list loading utilities.

A word list is plain text with one word per line. Lines are lower-cased and
only tokens of exactly ``word_length`` ASCII letters are kept; the first
occurrence of a word fixes its position.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from .wordle_env import WordList

log = logging.getLogger(__name__)

_DATA = Path(__file__).resolve().parent / "data"


@dataclass
class Lexicon:
    """A dictionary loaded from a word-list file."""
    words: WordList
    source: Path

    @property
    def word_length(self) -> int:
        return self.words.word_length

    def vocabulary(self) -> tuple[str, ...]:
        return tuple(str(w) for w in self.words)


def default_path(word_length: int = 5) -> Path:
    return _DATA / f"words_{word_length}.txt"


def _load_txt(path: Path, word_length: int) -> list[str]:
    pattern = re.compile(rf"^[a-z]{{{word_length}}}$")
    seen: set[str] = set()
    words: list[str] = []
    skipped = 0
    for raw in path.read_text(encoding="utf-8").splitlines():
        w = raw.strip().lower()
        if not w or w in seen:
            continue
        if pattern.match(w):
            seen.add(w)
            words.append(w)
        else:
            skipped += 1
    if skipped:
        log.debug("%s: skipped %d tokens that are not %d-letter words",
                  path, skipped, word_length)
    return words


def load_lexicon(path: str | Path | None = None, word_length: int = 5) -> Lexicon:
    """Load the words of length *word_length*.

    Parameters
    ----------
    path : str, Path or None
        Plain-text word list. None uses the bundled list for *word_length*.
    word_length : int
        Only keep words of this exact length.

    Returns
    -------
    Lexicon
    """
    src = Path(path) if path is not None else default_path(word_length)
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    words = _load_txt(src, word_length)
    if not words:
        raise ValueError(f"No {word_length}-letter words found in {src}")

    log.info("loaded %d %d-letter words from %s", len(words), word_length, src)
    return Lexicon(words=WordList(words, word_length), source=src)
