"""Game loop modules for Sliding Tiles."""

from game.input_handler import InputSource, PygameInputSource, CursesInputSource
from game.game_loop import GameSession, start_pygame_game, start_terminal_game

__all__ = [
    'InputSource',
    'PygameInputSource',
    'CursesInputSource',
    'GameSession',
    'start_pygame_game',
    'start_terminal_game',
]
