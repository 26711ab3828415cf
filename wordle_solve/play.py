#!/usr/bin/env python3
"""Play one game of Wordle at the terminal.

Modes:
    auto    the solver plays against a secret word
    human   you guess a random secret word
    assist  play along with a Wordle game elsewhere: you type your guesses
            and the colours you get (g/y/b) until you hand over to the solver

Usage:
    python3 -m wordle_solve.play --mode auto --secret favor --max-guesses 10
    python3 -m wordle_solve.play --mode human
    python3 -m wordle_solve.play --words words3.txt --length 3 --opener cat
    python3 -m wordle_solve.play --mode assist --verbose
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from .errors import WordleError
from .interactive import OracleEnv
from .lexicon import load_lexicon
from .strategies import find_strategy
from .strategies.human_strat import HumanGuesser, HumanThenSolver
from .strategies.minimax_strat import MinimaxStrategy
from .strategy import GameConfig
from .wordle_env import WordleEnv, run_game
from .words import LetterOutcome, Score

_TILES = {
    LetterOutcome.RIGHT_PLACE: "\U0001f7e9",
    LetterOutcome.RIGHT_LETTER: "\U0001f7e8",
    LetterOutcome.WRONG: "⬛",
}


def tiles(score: Score) -> str:
    return "".join(_TILES[LetterOutcome(o)] for o in score)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Wordle against the solver, or let it help you",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage:", 1)[1],
    )
    parser.add_argument("--mode", choices=["auto", "human", "assist"], default="auto",
                        help="Who guesses and who scores (default: auto)")
    parser.add_argument("--strategy", type=str, default="Minimax",
                        help="Solver used in auto mode (default: Minimax)")
    parser.add_argument("--opener", action="append", default=None,
                        help="Opening guess for the solver (repeatable, replaces its defaults)")
    parser.add_argument("--secret", type=str, default=None,
                        help="Secret word (default: random dictionary word)")
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list (default: bundled list)")
    parser.add_argument("--length", type=int, default=5, help="Word length")
    parser.add_argument("--max-guesses", type=int, default=6, help="Max guesses per game")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the secret")
    parser.add_argument("--verbose", action="store_true", help="Log solver internals")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "auto":
        try:
            cls = find_strategy(args.strategy)
        except KeyError as exc:
            print(exc.args[0], file=sys.stderr)
            return 2

    try:
        lex = load_lexicon(path=args.words, word_length=args.length)
        config = GameConfig(
            word_length=args.length,
            vocabulary=lex.vocabulary(),
            max_guesses=args.max_guesses,
        )

        if args.mode == "assist":
            env = OracleEnv(args.length, max_guesses=args.max_guesses)
            solver = MinimaxStrategy(openers=args.opener) if args.opener else None
            strat = HumanThenSolver(solver=solver)
        else:
            env = WordleEnv(lex.words, max_guesses=args.max_guesses)
            env.reset(secret=args.secret, rng=random.Random(args.seed))
            if args.mode == "human":
                strat = HumanGuesser()
            else:
                strat = cls(openers=args.opener) if args.opener else cls()

        print(f"Vocabulary: {len(lex.words)} words of length {args.length}")
        print(f"Strategy: {strat.name}, {args.max_guesses} guesses")
        strat.begin_game(config)
        solved = run_game(env, strat)
    except (EOFError, KeyboardInterrupt):
        print("  Aborted.")
        return 1
    except (WordleError, ValueError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    for i, (word, pat) in enumerate(env.history, 1):
        print(f"  Guess {i}: {word}  {tiles(pat)}")
    if solved:
        print(f"Solved in {len(env.history)} guesses.")
        return 0
    if isinstance(env, WordleEnv):
        print(f"Out of guesses! The word was {env.secret}.")
    else:
        print("Out of guesses!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
