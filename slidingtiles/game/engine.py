"""
Game engine tying the game state to the animation layer.

The engine never reads input or draws. A game loop hands it one
InputEvent per poll and asks it how long the next poll may block;
renderers sample its query methods.
"""
import logging
from typing import Callable, List, Optional

from slidingtiles.constants import (
    ANIMATION_DURATION_MS, POLL_TIMEOUT_MS, Direction, GameStatus, InputEvent,
)
from slidingtiles.core.game_state import GameState
from slidingtiles.core.grid import TileGrid
from slidingtiles.core.records import Appearing, Movement, MoveResult
from slidingtiles.game.animation import AnimationController

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Applies moves, spawns tiles and drives animation windows.

    Attributes:
        game_state: The GameState being played
        animation: AnimationController for the current window
        poll_timeout_ms: Poll timeout used while an animation runs
        last_result: MoveResult of the most recent applied move
    """

    def __init__(self, game_state: Optional[GameState] = None,
                 duration_ms: int = ANIMATION_DURATION_MS,
                 poll_timeout_ms: int = POLL_TIMEOUT_MS,
                 clock: Optional[Callable[[], float]] = None,
                 seed: Optional[int] = None) -> None:
        """
        Initialize the engine.

        Args:
            game_state: Existing game to drive; a new one is created if None
            duration_ms: Animation window length in milliseconds
            poll_timeout_ms: How long a poll may block while animating
            clock: Function returning the current time in seconds
            seed: Seed for a newly created game
        """
        self.game_state = game_state if game_state is not None else GameState(seed=seed)
        self.animation = AnimationController(self.game_state, duration_ms, clock)
        self.poll_timeout_ms = poll_timeout_ms
        self.last_result: Optional[MoveResult] = None

    def new_game(self) -> List[Appearing]:
        """Start a fresh game with the starting tiles placed."""
        self.animation.finish()
        self.last_result = None
        spawned = self.game_state.start()
        logger.info("New game started")
        return spawned

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle(self, event) -> bool:
        """
        Process one input event.

        Args:
            event: InputEvent from the input source

        Returns:
            False if the game loop should stop, True otherwise
        """
        if event is InputEvent.QUIT:
            logger.debug("Quit requested")
            return False

        if not isinstance(event, InputEvent) or event is InputEvent.NONE:
            self.animation.update()
            return True

        direction = event.to_direction()
        if direction is None:
            return True

        self.animation.finish()
        self.apply_move(direction)
        return True

    def apply_move(self, direction: Direction) -> MoveResult:
        """
        Apply a move on a settled grid and start its animation.

        Args:
            direction: Direction to move

        Returns:
            The MoveResult from the game state
        """
        self.animation.finish()
        previous_status = self.game_state.status

        result = self.game_state.move(direction)
        self.last_result = result

        appearing = None
        if result.moved:
            appearing = self.game_state.spawn_tile(commit=False)

        self.animation.start(result, [appearing] if appearing else [])

        if result.status is not previous_status:
            logger.info(f"Game status changed to {result.status.name}")
        return result

    def poll_timeout(self) -> Optional[int]:
        """Milliseconds the next poll may block, or None to wait forever."""
        if self.animation.is_animating:
            return self.poll_timeout_ms
        return None

    # ------------------------------------------------------------------
    # Queries for renderers
    # ------------------------------------------------------------------

    def grid(self) -> TileGrid:
        """The tile grid."""
        return self.game_state.grid

    def state(self) -> GameStatus:
        """Current game status."""
        return self.game_state.status

    def score(self) -> int:
        """Current score."""
        return self.game_state.score

    def animation_progress(self) -> float:
        """Progress of the running animation in [0, 1]."""
        return self.animation.progress()

    def movements(self) -> List[Movement]:
        """Tiles sliding in the current animation window."""
        return list(self.animation.movements)

    def appearing(self) -> List[Appearing]:
        """Tiles appearing in the current animation window."""
        return list(self.animation.appearing)

    def is_animating(self) -> bool:
        """Check if an animation window is open."""
        return self.animation.is_animating
