"""
__main__.py
-----------
Command-line entry point.

Usage:
    python -m neon_invaders
    python -m neon_invaders --config my_tuning.json --fps 120
    python -m neon_invaders --log-level VERBOSE
"""

import argparse
import sys

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.core.runtime.game_settings import Display, GameConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="neon_invaders", description="Neon Invaders arcade game")
    parser.add_argument("--config", default="game.json",
                        help="Gameplay tuning JSON (filename in the config index or a path)")
    parser.add_argument("--fps", type=int, default=Display.FPS,
                        help="Target frame rate")
    parser.add_argument("--font", default=None,
                        help="Optional TTF font for the HUD")
    parser.add_argument("--log-level", default="INFO",
                        choices=list(DebugLogger.LEVEL_VALUES),
                        help="Console log verbosity")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    DebugLogger.set_level(args.log_level)

    config = GameConfig.load(args.config)

    # pygame is only imported once a window is actually needed
    from neon_invaders.core.runtime.main_loop import MainLoop
    MainLoop(config, fps=args.fps, font_path=args.font).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
