"""
Game engine module.
"""
from slidingtiles.game.animation import AnimationController, AnimationPhase
from slidingtiles.game.engine import GameEngine

__all__ = ['AnimationController', 'AnimationPhase', 'GameEngine']
