#!/usr/bin/env python3
"""Play two difficulty levels against each other and report win rates."""

import argparse
import json
import logging
from functools import partial

import numpy as np
from tqdm.auto import trange

from kalah import GameConfig, load_config
from kalah.evaluation import RandomPolicy, SearchPolicy, evaluate_policies


def make_policy(level: int, workers: int, seed: int):
    if level <= 0:
        return RandomPolicy(np.random.default_rng(seed))
    return SearchPolicy(level, workers=workers)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--human-level", type=int, default=1, help="0 plays random moves")
    parser.add_argument("--computer-level", type=int, default=3, help="0 plays random moves")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--pits", type=int)
    parser.add_argument("--seeds", type=int)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config) if args.config else GameConfig()
    if args.pits is not None or args.seeds is not None:
        config = config.with_board(
            args.pits if args.pits is not None else config.pits_per_player,
            args.seeds if args.seeds is not None else config.seeds_per_pit,
        )

    result = evaluate_policies(
        make_policy(args.human_level, args.workers, args.seed),
        make_policy(args.computer_level, args.workers, args.seed + 1),
        episodes=args.episodes,
        config=config,
        iterator_factory=partial(trange, desc="Games"),
    )
    print(
        json.dumps(
            {
                "human_level": args.human_level,
                "computer_level": args.computer_level,
                "games_played": result.games_played,
                "human_winrate": result.winrate_human(),
                "computer_winrate": result.winrate_computer(),
                "ties": result.ties,
                "average_length": result.average_length,
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
