"""
Game constants for Sliding Tiles.
"""
from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """Move directions with their (dx, dy) offset on the grid."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        """Offset vector as (dx, dy)."""
        return self.value

    @property
    def is_vertical(self) -> bool:
        """Check if this direction moves tiles along a column."""
        return self in (Direction.UP, Direction.DOWN)


class GameStatus(Enum):
    """Enumeration of game outcomes."""
    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'

    def is_terminal(self) -> bool:
        """Check if no further moves may be applied."""
        return self is not GameStatus.PLAYING


class InputEvent(Enum):
    """Events an input source can deliver to the engine."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    QUIT = 'quit'
    NONE = 'none'

    def to_direction(self):
        """Return the matching Direction, or None for non-move events."""
        return _EVENT_DIRECTIONS.get(self)


_EVENT_DIRECTIONS = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}


# Board layout
NCOLS = 5
NROWS = 4
STARTING_TILES = 2

# Game rules
WIN_VALUE = 2048
SPAWN_FOUR_THRESHOLD = 0.9  # draws above this spawn a 4

# Animation timing
ANIMATION_DURATION_MS = 500
POLL_TIMEOUT_MS = 10
ANIMATION_FINISH_RATIO = 0.99

# Display settings
CELL_SIZE = 72
CELL_GAP = 8
HEADER_HEIGHT = 48
FOOTER_HEIGHT = 40

SCORE_TEMPLATE = "Score: {}"
INSTRUCTIONS = "←,↑,→,↓ or q"
WON_TEXT = "You won!"
LOST_TEXT = "You lost!"

# xterm-256 palette indices for the terminal frontend
BOARD_COLOR_CODE = 137
EMPTY_CELL_COLOR_CODE = 180
TEXT_COLOR_CODE = 232
TILE_COLOR_CODES: Dict[int, int] = {
    2: 224,
    4: 222,
    8: 216,
    16: 209,
    32: 202,
    64: 203,
    128: 230,
    256: 226,
    512: 193,
    1024: 190,
    2048: 214,
}

# The same palette as RGB for the window frontend
BOARD_COLOR = (175, 135, 95)
EMPTY_CELL_COLOR = (215, 175, 135)
BACKGROUND_COLOR = (0, 0, 0)
TEXT_COLOR = (8, 8, 8)
HUD_TEXT_COLOR = (255, 255, 255)
WON_COLOR = (50, 205, 50)
LOST_COLOR = (220, 50, 50)
FALLBACK_TILE_COLOR = (30, 30, 30)
TILE_COLORS: Dict[int, Tuple[int, int, int]] = {
    2: (255, 215, 215),
    4: (255, 215, 135),
    8: (255, 175, 135),
    16: (255, 135, 95),
    32: (255, 95, 0),
    64: (255, 95, 95),
    128: (255, 255, 215),
    256: (255, 255, 0),
    512: (215, 255, 175),
    1024: (215, 255, 0),
    2048: (255, 175, 0),
}
