"""
Records produced by a move and consumed by the animation layer.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from slidingtiles.constants import GameStatus

Position = Tuple[int, int]


@dataclass(frozen=True)
class Movement:
    """
    A tile that changed position during one sweep.

    Attributes:
        value: Value the tile carried before the move
        origin: (column, row) where the tile started
        destination: (column, row) where the tile ended up
    """

    value: int
    origin: Position
    destination: Position


@dataclass(frozen=True)
class Appearing:
    """A spawned tile whose value is not yet committed into the grid."""

    position: Position
    value: int


@dataclass
class MoveResult:
    """
    Outcome of one call to ``GameState.move``.

    Attributes:
        moved: True if at least one tile changed position
        movements: One record per tile that moved, in sweep order
        merges: Positions that received a merge this sweep
        score_deltas: Value of every merge result, in sweep order
        status: Game status after the move
    """

    moved: bool = False
    movements: List[Movement] = field(default_factory=list)
    merges: List[Position] = field(default_factory=list)
    score_deltas: List[int] = field(default_factory=list)
    status: GameStatus = GameStatus.PLAYING

    @property
    def score_gained(self) -> int:
        """Total score added by this move."""
        return sum(self.score_deltas)
