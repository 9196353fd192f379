from __future__ import annotations

import argparse
import logging
from typing import Optional

import numpy as np

from pinfall.config import FullConfig, load_config
from pinfall.game import BowlingGame
from pinfall.rules.fsm import BowlingRules

logger = logging.getLogger(__name__)


def sample_pins(rng: np.random.Generator, mask: np.ndarray) -> int:
    legal = np.flatnonzero(mask)
    if len(legal) == 0:
        raise ValueError("no legal pin counts to sample from")
    return int(rng.choice(legal))


def play_random_game(rng: np.random.Generator, rules: Optional[BowlingRules] = None) -> BowlingGame:
    game = BowlingGame(rules)
    while not game.is_complete:
        masks = game.rules.legal_actions(game.state)
        game.roll(sample_pins(rng, masks["pins"]))
    return game


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, default="")
    ap.add_argument("--n_games", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = load_config(args.config) if args.config else FullConfig()
    n_games = args.n_games if args.n_games is not None else cfg.sim.n_games
    seed = args.seed if args.seed is not None else cfg.seed

    rng = np.random.default_rng(seed)
    rules = BowlingRules.from_config(cfg.rules)
    scores = np.array([play_random_game(rng, rules).score() for _ in range(n_games)])
    logger.info("simulated %d games with seed %d", n_games, seed)

    print(f"\n== Random games ==\nGAMES: {n_games}  SEED: {seed}\n")
    print(f"mean={scores.mean():.2f}  std={scores.std():.2f}")
    print(f"min={scores.min()}  p10={np.percentile(scores, 10):.0f}  "
          f"p50={np.percentile(scores, 50):.0f}  p90={np.percentile(scores, 90):.0f}  max={scores.max()}")


if __name__ == "__main__":
    main()
