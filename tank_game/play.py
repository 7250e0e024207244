"""
Interactive entry point

    tank-game --seed 7 --assets ./assets
"""

import argparse
import logging
import os
from pathlib import Path

import arcade

from .config import GameConfig
from .session import GameSession
from .window import TankWindow


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the tank arena")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")
    parser.add_argument("--width", type=int, default=GameConfig.width, help="Play area width")
    parser.add_argument("--height", type=int, default=GameConfig.height, help="Play area height")
    parser.add_argument("--assets", type=Path, default=None,
                        help="Directory holding player_tank.png / enemy_tank.png")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("TANK_GAME_LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: $TANK_GAME_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(width=args.width, height=args.height)
    session = GameSession(config=config, seed=args.seed)
    TankWindow(session, asset_dir=args.assets)
    arcade.run()


if __name__ == "__main__":
    main()
