"""
Renderer interface and the frame layout shared by all frontends.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class DrawTile:
    """
    One tile to draw in a frame.

    Attributes:
        col: Column position, fractional while sliding
        row: Row position, fractional while sliding
        value: Value shown on the tile
        scale: Size factor, below 1.0 while appearing
    """

    col: float
    row: float
    value: int
    scale: float = 1.0


def layout_frame(engine) -> List[DrawTile]:
    """
    Work out where every visible tile sits for the current frame.

    Settled tiles are drawn in place. While an animation runs, pending
    cells show their settled value, sliding tiles are interpolated from
    origin to destination and appearing tiles grow in.

    Args:
        engine: GameEngine to sample

    Returns:
        Tiles in draw order, static ones first
    """
    grid = engine.grid()
    movements = engine.movements()
    appearing = engine.appearing()
    progress = engine.animation_progress()

    origins = {m.origin for m in movements}
    tiles = []
    for x in range(grid.width):
        for y in range(grid.height):
            if (x, y) in origins:
                continue
            value = grid.display_value(x, y)
            if value:
                tiles.append(DrawTile(x, y, value))

    for movement in movements:
        ox, oy = movement.origin
        dx, dy = movement.destination
        tiles.append(DrawTile(
            ox + (dx - ox) * progress,
            oy + (dy - oy) * progress,
            movement.value,
        ))

    for tile in appearing:
        x, y = tile.position
        tiles.append(DrawTile(x, y, tile.value, progress))

    return tiles


class Renderer(ABC):
    """Draws the game; the engine never draws by itself."""

    @abstractmethod
    def draw(self, engine) -> None:
        """Draw one frame sampled from the engine."""

    def present(self) -> None:
        """Show the frame drawn since the last call."""

    def close(self) -> None:
        """Release display resources."""
