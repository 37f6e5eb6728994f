"""
Rendering frontends.
"""
from slidingtiles.ui.base import DrawTile, Renderer, layout_frame

__all__ = ['DrawTile', 'Renderer', 'layout_frame']
