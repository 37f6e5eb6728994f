"""
Tile grid storage for the game board.
"""
from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from slidingtiles.constants import NCOLS, NROWS
from slidingtiles.core.tile import Tile


class TileGrid:
    """
    Fixed-size board indexed ``[column][row]``.

    Tile values live in an integer array. The per-cycle ``blocked`` and
    ``pending`` flags are kept in parallel boolean arrays so the values
    themselves stay a plain matrix. ``settled`` holds the values the
    player saw when the last animation finished; pending cells render
    from it.
    """

    def __init__(self, values: Optional[Sequence[Sequence[int]]] = None,
                 width: int = NCOLS, height: int = NROWS) -> None:
        """
        Initialize the grid.

        Args:
            values: Optional ``[column][row]`` matrix of starting values
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If ``values`` does not match ``(width, height)``
        """
        self.width = width
        self.height = height

        if values is None:
            self.values = np.zeros((width, height), dtype=np.int64)
        else:
            self.values = np.array(values, dtype=np.int64)
            if self.values.shape != (width, height):
                raise ValueError(
                    f"Grid values must have shape ({width}, {height}), "
                    f"got {self.values.shape}"
                )

        self.blocked = np.zeros((width, height), dtype=bool)
        self.pending = np.zeros((width, height), dtype=bool)
        self.settled = self.values.copy()

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if a position lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Tile:
        """Get a snapshot of the tile at a position."""
        return Tile(
            value=int(self.values[x, y]),
            x=x,
            y=y,
            blocked=bool(self.blocked[x, y]),
            pending=bool(self.pending[x, y]),
        )

    def get_value(self, x: int, y: int) -> int:
        """Get the logical value at a position."""
        return int(self.values[x, y])

    def set_value(self, x: int, y: int, value: int) -> None:
        """Set the logical value at a position."""
        self.values[x, y] = value

    def display_value(self, x: int, y: int) -> int:
        """Value to show for a cell: the settled one while it is pending."""
        if self.pending[x, y]:
            return int(self.settled[x, y])
        return int(self.values[x, y])

    def is_empty(self, x: int, y: int) -> bool:
        """Check if a cell holds no tile."""
        return self.values[x, y] == 0

    def move_tile(self, from_pos: Tuple[int, int], to_pos: Tuple[int, int]) -> None:
        """Move a tile and its blocked flag into an empty cell."""
        fx, fy = from_pos
        tx, ty = to_pos
        self.values[tx, ty] = self.values[fx, fy]
        self.blocked[tx, ty] = self.blocked[fx, fy]
        self.values[fx, fy] = 0
        self.blocked[fx, fy] = False

    def empty_cells(self) -> List[Tuple[int, int]]:
        """List empty positions in column-major order."""
        xs, ys = np.nonzero(self.values == 0)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def has_empty(self) -> bool:
        """Check if any cell is empty."""
        return bool((self.values == 0).any())

    def has_adjacent_pair(self) -> bool:
        """Check if any two 4-adjacent cells hold the same non-zero value."""
        vals = self.values
        horizontal = (vals[:-1, :] == vals[1:, :]) & (vals[1:, :] != 0)
        vertical = (vals[:, :-1] == vals[:, 1:]) & (vals[:, 1:] != 0)
        return bool(horizontal.any() or vertical.any())

    def clear_blocked(self) -> None:
        """Reset merge-blocked flags for a new sweep."""
        self.blocked[:, :] = False

    def set_pending(self, x: int, y: int, pending: bool = True) -> None:
        """Set or clear the pending flag of a cell."""
        self.pending[x, y] = pending

    def has_pending(self) -> bool:
        """Check if any cell still shows its pre-move value."""
        return bool(self.pending.any())

    def snapshot_settled(self) -> None:
        """Record the current values as what the player last saw."""
        self.settled = self.values.copy()

    def clear(self) -> None:
        """Empty the board and reset all flags."""
        self.values[:, :] = 0
        self.blocked[:, :] = False
        self.pending[:, :] = False
        self.settled = self.values.copy()

    def total(self) -> int:
        """Sum of all tile values."""
        return int(self.values.sum())

    def max_value(self) -> int:
        """Largest tile value on the board."""
        return int(self.values.max())

    def rows(self) -> List[List[int]]:
        """Logical values as a list of rows, top row first."""
        return self.values.T.tolist()

    def columns(self) -> List[List[int]]:
        """Logical values as a list of columns, left column first."""
        return self.values.tolist()

    def __iter__(self) -> Iterator[Tile]:
        for x in range(self.width):
            for y in range(self.height):
                yield self.get_tile(x, y)

    def __repr__(self):
        return f"TileGrid({self.columns()!r})"
