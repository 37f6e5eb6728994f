"""
CLI Commands for Sliding Tiles.

This module contains the command implementations for different modes:
- play: Interactive gameplay in a window or terminal
- simulate: Headless random-move games with summary statistics
"""

import logging

import numpy as np

from slidingtiles.constants import Direction, GameStatus
from slidingtiles.core.game_state import GameState

logger = logging.getLogger(__name__)

MAX_SIMULATED_MOVES = 10000


def play_mode(args, settings):
    """Interactive play mode."""
    frontend = args.frontend or settings.get_frontend()
    duration_ms = args.animation_ms
    if duration_ms is None:
        duration_ms = settings.get('animation.duration_ms')
    poll_timeout_ms = settings.get('animation.poll_timeout_ms')

    print(f"\n🎮 Starting Sliding Tiles ({frontend})...\n")

    if frontend == 'curses':
        from game.game_loop import start_terminal_game
        status = start_terminal_game(
            seed=args.seed,
            duration_ms=duration_ms,
            poll_timeout_ms=poll_timeout_ms,
        )
    elif frontend == 'pygame':
        from game.game_loop import start_pygame_game
        status = start_pygame_game(
            seed=args.seed,
            duration_ms=duration_ms,
            poll_timeout_ms=poll_timeout_ms,
            cell_size=settings.get('video.cell_size'),
        )
    else:
        print(f"❌ Unknown frontend: {frontend}")
        return None

    if status is GameStatus.WON:
        print("🎉 You won!")
    elif status is GameStatus.LOST:
        print("You lost!")
    return status


def simulate_game(rng):
    """
    Play one game with uniformly random moves.

    Args:
        rng: numpy Generator used for both moves and spawns

    Returns:
        Finished GameState
    """
    state = GameState(rng=rng)
    state.start()
    directions = list(Direction)

    for _ in range(MAX_SIMULATED_MOVES):
        if state.status.is_terminal():
            break
        direction = directions[int(rng.integers(len(directions)))]
        result = state.move(direction)
        if result.moved:
            state.spawn_tile()

    return state


def simulate_mode(args):
    """Run headless random games and print summary statistics."""
    rng = np.random.default_rng(args.seed)

    print(f"\n{'='*60}")
    print(f"🎲 Simulating {args.games} random games")
    print(f"{'='*60}\n")

    scores = []
    max_tiles = []
    wins = 0
    for game_index in range(args.games):
        state = simulate_game(rng)
        scores.append(state.score)
        max_tiles.append(state.max_tile())
        if state.status is GameStatus.WON:
            wins += 1
        logger.debug(f"Game {game_index + 1}: score {state.score}, "
                     f"max tile {state.max_tile()}, {state.status.name}")

    summary = {
        'games': args.games,
        'wins': wins,
        'avg_score': float(np.mean(scores)) if scores else 0.0,
        'best_score': int(np.max(scores)) if scores else 0,
        'best_tile': int(np.max(max_tiles)) if max_tiles else 0,
    }

    print("📊 Simulation Results:")
    print(f"Games:        {summary['games']}")
    print(f"Wins:         {summary['wins']}")
    print(f"Avg Score:    {summary['avg_score']:.1f}")
    print(f"Best Score:   {summary['best_score']}")
    print(f"Best Tile:    {summary['best_tile']}")
    print(f"{'='*60}\n")
    return summary
