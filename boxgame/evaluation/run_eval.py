"""
Evaluation Harness
==================

Plays token sequences through the game and summarizes the scores.

Usage:
    python -m boxgame.evaluation.run_eval --tokens 1 1 2 3
    python -m boxgame.evaluation.run_eval --bank path/to/token_bank.json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
import numpy as np

from boxgame.core.config_loader import GameConfig, get_config, load_config
from boxgame.core.game import CoreGame, GameResult, format_scores, validate_token


@dataclass
class EvalResult:
    """Result for a single token sequence."""
    name: str
    tokens: List[int]
    result: GameResult


@dataclass
class EvalSummary:
    """Summary of evaluation across all sequences."""
    player_names: Sequence[str]
    mean_scores: List[float]
    std_scores: List[float]
    max_scores: List[float]
    wins: List[int]
    draws: int
    results: List[EvalResult]


def load_token_bank(path: Optional[str] = None) -> Dict[str, List[int]]:
    """
    Load a bank of named token sequences.

    Args:
        path: Path to token_bank.json. Uses default if None.

    Returns:
        Mapping of sequence name to token list.

    Raises:
        ValueError: If the bank is malformed or holds an invalid token.
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "token_bank.json")

    with open(path, "r") as f:
        data = json.load(f)

    sequences = data.get("sequences") if isinstance(data, dict) else None
    if not isinstance(sequences, dict):
        raise ValueError(f"Token bank {path} must contain a 'sequences' mapping")

    bank: Dict[str, List[int]] = {}
    for name, tokens in sequences.items():
        if not isinstance(tokens, list):
            raise ValueError(f"Sequence '{name}' must be a list of tokens")
        bank[name] = [validate_token(t, i) for i, t in enumerate(tokens)]
    return bank


def evaluate_sequence(
    name: str,
    tokens: Sequence[int],
    config: Optional[GameConfig] = None,
    debug: bool = False,
    verbose: bool = False
) -> EvalResult:
    """
    Play a single token sequence.

    Args:
        name: Label for the sequence.
        tokens: Token weights.
        config: Game configuration. Uses default if None.
        debug: If True, print every turn.
        verbose: If True, print the score line.

    Returns:
        EvalResult for this sequence.
    """
    game = CoreGame(config=config, debug=debug)
    result = game.run(tokens)

    if verbose:
        print(f"  {name}: {format_scores(result)}, "
              f"winner={result.winner or 'draw'}")

    return EvalResult(name=name, tokens=list(tokens), result=result)


def evaluate_bank(
    bank: Dict[str, List[int]],
    config: Optional[GameConfig] = None,
    debug: bool = False,
    verbose: bool = True
) -> EvalSummary:
    """
    Play every sequence in a token bank.

    Args:
        bank: Mapping of sequence name to tokens.
        config: Game configuration. Uses default if None.
        debug: If True, print every turn.
        verbose: If True, print progress and the summary table.

    Returns:
        EvalSummary with aggregate statistics.
    """
    if config is None:
        config = get_config()

    names = list(config.players.names)

    if verbose:
        print(f"Playing {len(bank)} sequences...")

    results: List[EvalResult] = []
    for seq_name, tokens in bank.items():
        results.append(evaluate_sequence(
            seq_name,
            tokens,
            config=config,
            debug=debug,
            verbose=verbose
        ))

    scores = np.array(
        [r.result.scores for r in results], dtype=np.float64
    ).reshape(-1, 2)

    if len(results) > 0:
        mean_scores = [float(v) for v in np.mean(scores, axis=0)]
        std_scores = [float(v) for v in np.std(scores, axis=0)]
        max_scores = [float(v) for v in np.max(scores, axis=0)]
    else:
        mean_scores = [0.0, 0.0]
        std_scores = [0.0, 0.0]
        max_scores = [0.0, 0.0]

    wins = [
        int(np.sum(scores[:, 0] > scores[:, 1])),
        int(np.sum(scores[:, 1] > scores[:, 0])),
    ]
    draws = len(results) - sum(wins)

    summary = EvalSummary(
        player_names=names,
        mean_scores=mean_scores,
        std_scores=std_scores,
        max_scores=max_scores,
        wins=wins,
        draws=draws,
        results=results
    )

    if verbose:
        print()
        print("=" * 50)
        print("EVALUATION SUMMARY")
        print("=" * 50)
        print(f"Sequences played: {len(results)}")
        for i, player in enumerate(names):
            print(f"Player {player}: mean={summary.mean_scores[i]:.2f}, "
                  f"std={summary.std_scores[i]:.2f}, "
                  f"max={summary.max_scores[i]:g}, wins={summary.wins[i]}")
        print(f"Draws:            {summary.draws}")
        print("=" * 50)

    return summary


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play the box game")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--tokens",
        type=int,
        nargs="*",
        default=None,
        help="Token weights for a single game"
    )
    source.add_argument(
        "--bank",
        type=str,
        default=None,
        help="Path to token bank JSON (uses default if neither option is given)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to game_config.yaml (uses default if not specified)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every turn"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_config()
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 1

    if args.tokens is not None:
        try:
            tokens = [validate_token(t, i) for i, t in enumerate(args.tokens)]
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        game = CoreGame(config=config, debug=args.debug)
        print(format_scores(game.run(tokens)))
        return 0

    try:
        bank = load_token_bank(args.bank)
    except (OSError, ValueError) as e:
        print(f"Error loading token bank: {e}")
        return 1

    evaluate_bank(bank, config=config, debug=args.debug, verbose=not args.quiet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
