"""
Sliding Tiles - Main Entry Point

The 2048 sliding tile puzzle on a 5x4 board with animated moves.

Requirements:
    pip install pygame numpy

Usage:
    # Play in a window
    python main.py --mode play

    # Play in the terminal
    python main.py --mode play --frontend curses

    # Simulate random games
    python main.py --mode simulate --games 100 --seed 1
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from utils.dependency_checker import check_dependencies
from cli.commands import play_mode, simulate_mode


def build_parser():
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Sliding Tiles - the 2048 merging puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play in a pygame window
  python main.py --mode play

  # Play in the terminal with faster animations
  python main.py --mode play --frontend curses --animation-ms 200

  # Simulate 100 random games
  python main.py --mode simulate --games 100 --seed 7
        """
    )

    parser.add_argument(
        "--mode",
        type=str,
        default="play",
        choices=["play", "simulate"],
        help="Mode: play or simulate"
    )
    parser.add_argument(
        "--frontend",
        type=str,
        default=None,
        choices=["pygame", "curses"],
        help="Frontend for play mode (default from settings)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for tile spawns"
    )
    parser.add_argument(
        "--animation-ms",
        type=int,
        default=None,
        help="Animation window length in milliseconds"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=10,
        help="Number of games in simulate mode"
    )
    parser.add_argument(
        "--settings",
        type=str,
        default="settings.json",
        help="Path to the settings file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from settings)"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    from slidingtiles.utils.settings import get_settings

    args = build_parser().parse_args(argv)
    settings = get_settings(args.settings)

    logging.basicConfig(
        level=(args.log_level or settings.get('logging.level', 'WARNING')).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        filename="sliding_tiles.log" if args.mode == "play" else None,
    )

    # Check dependencies
    frontend = args.frontend or settings.get_frontend()
    if not check_dependencies(frontend):
        sys.exit(1)

    # Route to appropriate mode
    if args.mode == "play":
        play_mode(args, settings)
    elif args.mode == "simulate":
        simulate_mode(args)

    print("\n✅ Done!\n")


if __name__ == "__main__":
    main()
