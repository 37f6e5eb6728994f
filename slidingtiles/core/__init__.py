"""
Core game logic module.
"""
from slidingtiles.core.tile import Tile
from slidingtiles.core.grid import TileGrid
from slidingtiles.core.records import Appearing, Movement, MoveResult
from slidingtiles.core.game_state import GameState

__all__ = ['Tile', 'TileGrid', 'Appearing', 'Movement', 'MoveResult', 'GameState']
