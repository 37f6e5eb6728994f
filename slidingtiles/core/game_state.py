"""
Core game state management without rendering or timing dependencies.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from slidingtiles.constants import (
    NCOLS, NROWS, STARTING_TILES, WIN_VALUE, SPAWN_FOUR_THRESHOLD,
    Direction, GameStatus,
)
from slidingtiles.core.grid import TileGrid
from slidingtiles.core.records import Appearing, Movement, MoveResult

logger = logging.getLogger(__name__)


class GameState:
    """Owns the tile grid, the score and the game status."""

    def __init__(self, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None) -> None:
        """
        Initialize an empty game.

        Args:
            seed: Seed for the spawn random generator
            rng: Pre-built generator, takes precedence over ``seed``
        """
        self.grid = TileGrid(width=NCOLS, height=NROWS)
        self.score: int = 0
        self.status: GameStatus = GameStatus.PLAYING
        self.move_count: int = 0
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]], score: int = 0,
                    seed: Optional[int] = None) -> 'GameState':
        """
        Build a game from an explicit ``[column][row]`` matrix.

        Args:
            values: Tile values, one inner sequence per column
            score: Starting score
            seed: Seed for the spawn random generator
        """
        state = cls(seed=seed)
        state.grid = TileGrid(values, width=NCOLS, height=NROWS)
        state.score = score
        return state

    def reset(self) -> None:
        """Clear the board, score and status."""
        self.grid.clear()
        self.score = 0
        self.status = GameStatus.PLAYING
        self.move_count = 0

    def start(self) -> List[Appearing]:
        """Reset and place the starting tiles."""
        self.reset()
        spawned = []
        for _ in range(STARTING_TILES):
            appearing = self.spawn_tile()
            if appearing is not None:
                spawned.append(appearing)
        logger.debug(f"New game started with tiles {spawned}")
        return spawned

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def move(self, direction: Direction) -> MoveResult:
        """
        Push every tile as far as it goes in one direction.

        Tiles nearest the target edge are processed first so a tile can
        slide several cells in one move. A tile merges at most once per
        call: the merge target is blocked until the next call.

        Args:
            direction: Direction to push the tiles

        Returns:
            MoveResult describing what changed
        """
        if self.status.is_terminal():
            return MoveResult(moved=False, status=self.status)

        self.grid.clear_blocked()
        self.grid.snapshot_settled()

        result = MoveResult()
        for x, y in self._sweep_order(direction):
            if self.grid.is_empty(x, y):
                continue
            self._advance_tile(x, y, direction, result)

        result.moved = bool(result.movements)
        self.score += result.score_gained
        self.move_count += 1

        if not result.moved and not self.can_move():
            self.status = GameStatus.LOST
            logger.info(f"Game lost with score {self.score}")

        result.status = self.status
        logger.debug(
            f"Move {direction.name}: moved={result.moved}, "
            f"merges={len(result.merges)}, score={self.score}"
        )
        return result

    def _sweep_order(self, direction: Direction) -> List[Tuple[int, int]]:
        """Positions in the order a sweep processes them, nearest edge first."""
        columns = range(self.grid.width)
        rows = range(self.grid.height)
        if direction is Direction.DOWN:
            rows = reversed(rows)
        elif direction is Direction.RIGHT:
            columns = reversed(columns)

        if direction.is_vertical:
            rows = list(rows)
            return [(x, y) for x in columns for y in rows]
        columns = list(columns)
        return [(x, y) for y in rows for x in columns]

    def _advance_tile(self, x: int, y: int, direction: Direction,
                      result: MoveResult) -> None:
        """Advance one tile until it hits the edge or a tile it cannot join."""
        dx, dy = direction.offset
        start = (x, y)
        value = self.grid.get_value(x, y)
        merged = False

        while True:
            nx, ny = x + dx, y + dy
            if not self.grid.in_bounds(nx, ny):
                break

            if self.grid.is_empty(nx, ny):
                self.grid.move_tile((x, y), (nx, ny))
            elif self.grid.get_tile(x, y).can_merge_with(self.grid.get_tile(nx, ny)):
                self._merge((x, y), (nx, ny), result)
                merged = True
            else:
                break
            x, y = nx, ny

        if merged:
            result.merges.append((x, y))
        if (x, y) != start:
            result.movements.append(Movement(value=value, origin=start, destination=(x, y)))

    def _merge(self, from_pos: Tuple[int, int], to_pos: Tuple[int, int],
               result: MoveResult) -> None:
        """Fold the tile at ``from_pos`` into the equal tile at ``to_pos``."""
        tx, ty = to_pos
        merged_value = self.grid.get_value(tx, ty) * 2
        self.grid.set_value(from_pos[0], from_pos[1], 0)
        self.grid.set_value(tx, ty, merged_value)
        self.grid.blocked[tx, ty] = True
        result.score_deltas.append(merged_value)

        if merged_value == WIN_VALUE and self.status is GameStatus.PLAYING:
            self.status = GameStatus.WON
            logger.info(f"Reached {WIN_VALUE}, game won")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def can_move(self) -> bool:
        """Check if any cell is empty or any two neighbours hold equal values."""
        return self.grid.has_empty() or self.grid.has_adjacent_pair()

    def empty_cells(self) -> List[Tuple[int, int]]:
        """List empty positions."""
        return self.grid.empty_cells()

    def max_tile(self) -> int:
        """Largest value on the board."""
        return self.grid.max_value()

    def rows(self) -> List[List[int]]:
        """Board values as a list of rows, top row first."""
        return self.grid.rows()

    # ------------------------------------------------------------------
    # Spawning
    # ------------------------------------------------------------------

    def spawn_tile(self, commit: bool = True) -> Optional[Appearing]:
        """
        Spawn a 2 or a 4 on a random empty cell.

        Nothing spawns when the board is full or no move is possible.

        Args:
            commit: Write the value into the grid now. The engine passes
                False and lets the animation layer commit it later.

        Returns:
            The spawned tile, or None if nothing spawned
        """
        empty = self.grid.empty_cells()
        if not empty or not self.can_move():
            return None

        x, y = empty[int(self.rng.integers(len(empty)))]
        draw = float(self.rng.random())
        value = 4 if draw > SPAWN_FOUR_THRESHOLD else 2

        appearing = Appearing(position=(x, y), value=value)
        if commit:
            self.commit_appearing(appearing)
        return appearing

    def commit_appearing(self, appearing: Appearing) -> bool:
        """
        Write a deferred spawn into the grid.

        Returns:
            False if the cell was occupied and the spawn was dropped
        """
        x, y = appearing.position
        if not self.grid.is_empty(x, y):
            logger.warning(f"Dropped spawn at ({x}, {y}): cell occupied")
            return False
        self.grid.set_value(x, y, appearing.value)
        return True

    def __repr__(self):
        return (f"GameState(score={self.score}, status={self.status.name}, "
                f"rows={self.rows()!r})")
