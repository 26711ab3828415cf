"""Wordle game engine and maximin solver."""

from .errors import (
    EmptyCandidateSet,
    NotInWordList,
    TooManyGuesses,
    WordLengthError,
    WordleError,
)
from .lexicon import Lexicon, load_lexicon
from .strategy import GameConfig, Strategy
from .wordle_env import (
    GameState,
    WordList,
    WordleEnv,
    evaluate,
    filter_candidates,
    run_game,
    score_guess,
)
from .words import LetterOutcome, Score, Word

__all__ = [
    "EmptyCandidateSet",
    "GameConfig",
    "GameState",
    "LetterOutcome",
    "Lexicon",
    "NotInWordList",
    "Score",
    "Strategy",
    "TooManyGuesses",
    "Word",
    "WordLengthError",
    "WordList",
    "WordleEnv",
    "WordleError",
    "evaluate",
    "filter_candidates",
    "load_lexicon",
    "run_game",
    "score_guess",
]
