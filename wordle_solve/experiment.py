#!/usr/bin/env python3
"""Run a single strategy against many secrets with detailed per-game output."""

from __future__ import annotations

import argparse
import json
import logging
import math
import random
import sys
from pathlib import Path

import numpy as np

from .errors import WordleError
from .lexicon import load_lexicon
from .strategies import find_strategy
from .strategy import GameConfig, Strategy
from .wordle_env import WordList, WordleEnv, filter_candidates
from .words import Word, format_score

log = logging.getLogger(__name__)


def _entropy_bits(n: int) -> float:
    return math.log2(n) if n > 1 else 0.0


def run_experiment(
    strat: Strategy,
    dictionary: WordList,
    max_guesses: int = 6,
    num_games: int = 10,
    seed: int = 42,
    secrets: list[str] | None = None,
    verbose: bool = False,
) -> list[dict]:
    """Play *strat* once per secret and return one log entry per game.

    Secrets are sampled from *dictionary* with *seed* unless given.
    """
    words = list(dictionary)
    if secrets is None:
        rng = random.Random(seed)
        chosen = rng.sample(words, min(num_games, len(words)))
    else:
        chosen = [Word.parse(s, dictionary.word_length) for s in secrets]

    config = GameConfig(
        word_length=dictionary.word_length,
        vocabulary=tuple(str(w) for w in words),
        max_guesses=max_guesses,
    )
    env = WordleEnv(dictionary, max_guesses=max_guesses)

    logs: list[dict] = []

    for i, secret in enumerate(chosen, 1):
        env.reset(secret=secret)
        strat.begin_game(config)

        candidates = words
        game_log: list[dict] = []

        if verbose:
            print(f"\n--- Game {i}/{len(chosen)} | Secret: {secret} ---")

        while not env.game_over():
            word = strat.guess()
            pat = env.guess(word)
            if not env.game_over():
                strat.receive_score(pat)
            candidates = filter_candidates(candidates, word, pat)
            ent = _entropy_bits(len(candidates))

            step = {
                "guess": str(word),
                "score": format_score(pat),
                "remaining": len(candidates),
                "entropy_bits": round(ent, 3),
            }
            game_log.append(step)

            if verbose:
                print(
                    f"  Guess {len(game_log)}: {word}  {format_score(pat)}  "
                    f"remaining={len(candidates)}  H={ent:.2f} bits"
                )

        result = {
            "game": i,
            "secret": str(secret),
            "solved": env.is_solved(),
            "num_guesses": len(env.history),
            "steps": game_log,
        }
        logs.append(result)
        log.debug("%s: solved=%s in %d", secret, env.is_solved(), len(env.history))

        if verbose:
            status = "SOLVED" if env.is_solved() else "FAILED"
            print(f"  -> {status} in {len(env.history)} guesses")

    return logs


def summarize(logs: list[dict]) -> dict:
    if not logs:
        return {"games": 0, "solved": 0, "solve_rate": 0.0,
                "mean_guesses": 0.0, "median_guesses": 0.0, "max_guesses": 0}
    guesses = np.array([g["num_guesses"] for g in logs])
    solved = sum(1 for g in logs if g["solved"])
    return {
        "games": len(logs),
        "solved": solved,
        "solve_rate": round(solved / len(logs), 4),
        "mean_guesses": round(float(guesses.mean()), 3),
        "median_guesses": float(np.median(guesses)),
        "max_guesses": int(guesses.max()),
    }


def print_experiment_summary(logs: list[dict], strategy_name: str) -> None:
    s = summarize(logs)
    n = s["games"]
    print(f"\n=== {strategy_name} — {n} games ===")
    if not n:
        return
    print(f"  Solved: {s['solved']}/{n} ({100 * s['solve_rate']:.1f}%)")
    print(f"  Guesses — mean: {s['mean_guesses']:.2f}, "
          f"median: {s['median_guesses']:.1f}, max: {s['max_guesses']}")


def plot_distribution(logs: list[dict], strategy_name: str, path: Path) -> None:
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not installed — skipping plot", file=sys.stderr)
        return

    guesses = [g["num_guesses"] for g in logs]
    mx = max(guesses) if guesses else 6
    bins = list(range(1, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(guesses, bins=bins, edgecolor="black", align="left")
    ax.set_title(f"{strategy_name} — guess distribution")
    ax.set_xlabel("Guesses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {path}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Single-strategy Wordle experiment")
    parser.add_argument("--strategy", type=str, default="Minimax", help="Strategy name")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--length", type=int, default=5, help="Word length")
    parser.add_argument("--max-guesses", type=int, default=6, help="Max guesses per game")
    parser.add_argument("--num-games", type=int, default=10, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--opener", action="append", default=None,
                        help="Opening guess (repeatable, replaces the strategy defaults)")
    parser.add_argument("--secret", action="append", default=None,
                        help="Play this secret (repeatable) instead of sampling")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        lex = load_lexicon(path=args.words, word_length=args.length)
        cls = find_strategy(args.strategy)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return 2
    except (ValueError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    print(f"Vocabulary: {len(lex.words)} words of length {args.length}")

    strat = cls(openers=args.opener) if args.opener else cls()
    print(f"Strategy: {strat.name}")

    try:
        logs = run_experiment(
            strat=strat,
            dictionary=lex.words,
            max_guesses=args.max_guesses,
            num_games=args.num_games,
            seed=args.seed,
            secrets=args.secret,
            verbose=args.verbose,
        )
    except (WordleError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print_experiment_summary(logs, strat.name)

    if args.plot:
        plot_distribution(logs, strat.name, Path(args.plot))

    if args.json:
        json_path = Path(args.json)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        output = {
            "strategy": strat.name,
            "config": {
                "word_length": args.length,
                "max_guesses": args.max_guesses,
                "num_games": args.num_games,
                "seed": args.seed,
            },
            "summary": summarize(logs),
            "games": logs,
        }
        json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"JSON saved to {json_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
