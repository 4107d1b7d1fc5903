#!/usr/bin/env python3
"""Pong - Standalone Entry Point.

Usage:
    pong
    pong --difficulty hard
    pong --score-to-win 5 --seed 42
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pong import config
from pong.difficulty import Difficulty
from pong.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pong - player vs computer")

    # Display options
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT, help='Window height')
    parser.add_argument('--fps', type=int, default=config.FPS, help='Target frame rate')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')

    # Game options
    parser.add_argument('--difficulty', type=str, default=config.DEFAULT_DIFFICULTY,
                        choices=[d.value for d in Difficulty],
                        help='Initial difficulty')
    parser.add_argument('--score-to-win', type=int, default=config.SCORE_TO_WIN,
                        help='Points needed to win a match')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the opponent speed randomizer')
    parser.add_argument('--sounds-dir', type=Path, default=None,
                        help='Directory with background.ogg, hit.wav, game_over.wav, game_won.wav')
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='TRACE, DEBUG, INFO, WARNING, ERROR or OFF')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Pong standalone."""
    args = build_parser().parse_args(argv)

    configure_logging(level=args.log_level)

    from pong.app import PongApp

    app = PongApp(
        width=args.width,
        height=args.height,
        fps=args.fps,
        difficulty=args.difficulty,
        score_to_win=args.score_to_win,
        seed=args.seed,
        fullscreen=args.fullscreen,
        sounds_dir=args.sounds_dir,
    )

    print("\n" + "=" * 50)
    print("PONG")
    print("=" * 50)
    print("Controls:")
    print("  - Enter to start, pause and continue")
    print("  - Up/Down arrows to move your paddle")
    print("  - 1/2/3 to pick difficulty in the menu")
    print("  - R to restart from pause or game over")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        app.run()
    finally:
        app.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
