"""
Animation state for tile moves and spawns.

A move is applied to the grid instantly. This module keeps the records
needed to show it smoothly: which tiles are sliding, which are
appearing, and how far through the animation window we are. Spawned
values are only written into the grid once their animation completes.
"""
import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from slidingtiles.constants import ANIMATION_DURATION_MS, ANIMATION_FINISH_RATIO
from slidingtiles.core.game_state import GameState
from slidingtiles.core.records import Appearing, Movement, MoveResult, Position

logger = logging.getLogger(__name__)


class AnimationPhase(Enum):
    """Animation controller states."""
    IDLE = 'idle'
    ANIMATING = 'animating'


class AnimationController:
    """
    Tracks sliding and appearing tiles for one animation window.

    Animations never overlap: starting a new one, or receiving input
    while one runs, requires ``finish()`` first.
    """

    def __init__(self, game_state: GameState,
                 duration_ms: int = ANIMATION_DURATION_MS,
                 clock: Optional[Callable[[], float]] = None) -> None:
        """
        Initialize the controller.

        Args:
            game_state: Game whose grid flags this controller toggles
            duration_ms: Length of the animation window in milliseconds
            clock: Function returning the current time in seconds
        """
        self.game_state = game_state
        self.duration_ms = duration_ms
        self.clock = clock or time.monotonic

        self.phase = AnimationPhase.IDLE
        self.movements: List[Movement] = []
        self.appearing: List[Appearing] = []
        self.merges: List[Position] = []
        self.start_time: Optional[float] = None

    @property
    def is_animating(self) -> bool:
        """Check if an animation window is open."""
        return self.phase is AnimationPhase.ANIMATING

    def start(self, result: Optional[MoveResult] = None,
              appearing: Sequence[Appearing] = ()) -> bool:
        """
        Open an animation window for a move and its spawn.

        Destination and merge cells are flagged pending so they keep
        showing their pre-move value until the window closes.

        Args:
            result: Move outcome, if a move was applied
            appearing: Spawned tiles waiting to be committed

        Returns:
            True if there was anything to animate
        """
        if self.is_animating:
            self.finish()

        movements = list(result.movements) if result is not None else []
        merges = list(result.merges) if result is not None else []
        appearing = [a for a in appearing if a is not None]

        if not movements and not merges and not appearing:
            return False

        grid = self.game_state.grid
        for movement in movements:
            grid.set_pending(*movement.destination)
        for position in merges:
            grid.set_pending(*position)

        self.movements = movements
        self.merges = merges
        self.appearing = appearing
        self.start_time = self.clock()
        self.phase = AnimationPhase.ANIMATING
        logger.debug(
            f"Animation started: {len(movements)} moving, "
            f"{len(appearing)} appearing"
        )
        return True

    def finish(self) -> None:
        """
        Close the animation window and settle the grid.

        Clears pending flags and commits appearing tiles. Calling this
        while idle does nothing.
        """
        if not self.is_animating:
            return

        grid = self.game_state.grid
        for movement in self.movements:
            grid.set_pending(*movement.destination, pending=False)
        for position in self.merges:
            grid.set_pending(*position, pending=False)
        for appearing in self.appearing:
            self.game_state.commit_appearing(appearing)

        self.movements = []
        self.merges = []
        self.appearing = []
        self.start_time = None
        self.phase = AnimationPhase.IDLE
        logger.debug("Animation finished")

    def elapsed_ms(self) -> float:
        """Milliseconds since the window opened, 0 when idle."""
        if self.start_time is None:
            return 0.0
        return (self.clock() - self.start_time) * 1000.0

    def progress(self) -> float:
        """Fraction of the animation window elapsed, clamped to [0, 1]."""
        if not self.is_animating:
            return 1.0
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, self.elapsed_ms() / self.duration_ms))

    def update(self) -> bool:
        """
        Finish the animation once it has run its course.

        Returns:
            True if the animation finished on this call
        """
        if self.is_animating and self.progress() >= ANIMATION_FINISH_RATIO:
            self.finish()
            return True
        return False
