"""
Tile snapshot read out of a TileGrid.
"""
from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Tile:
    """
    Read-only view of one grid cell.

    Tiles compare equal by value only; position and the transient
    flags do not take part in merge equality.

    Attributes:
        value: Tile value (0 means empty)
        x: Column index
        y: Row index
        blocked: Already merged during the current sweep
        pending: Display should still show the pre-move value
    """

    value: int
    x: int = 0
    y: int = 0
    blocked: bool = False
    pending: bool = False

    def is_empty(self) -> bool:
        """Check if the cell holds no tile."""
        return self.value == 0

    def can_merge_with(self, other: 'Tile') -> bool:
        """Check if two tiles may merge in the current sweep."""
        return (not self.is_empty() and self == other
                and not self.blocked and not other.blocked)

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return str(self.value)
