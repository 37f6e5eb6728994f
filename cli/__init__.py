"""CLI commands for Sliding Tiles."""

from cli.commands import play_mode, simulate_mode

__all__ = ['play_mode', 'simulate_mode']
