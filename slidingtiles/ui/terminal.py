"""
Curses rendering for playing in a terminal.
"""
import curses
import logging

from slidingtiles.constants import (
    BOARD_COLOR_CODE, EMPTY_CELL_COLOR_CODE, TEXT_COLOR_CODE, TILE_COLOR_CODES,
    SCORE_TEMPLATE, INSTRUCTIONS, WON_TEXT, LOST_TEXT, GameStatus,
)
from slidingtiles.ui.base import Renderer, layout_frame

logger = logging.getLogger(__name__)

CELL_WIDTH = 6
CELL_HEIGHT = 3
BOARD_TOP = 2

# Basic colours for terminals without 256-colour support
_FALLBACK_COLORS = [
    curses.COLOR_WHITE, curses.COLOR_YELLOW, curses.COLOR_CYAN,
    curses.COLOR_MAGENTA, curses.COLOR_GREEN, curses.COLOR_BLUE, curses.COLOR_RED,
]


class CursesRenderer(Renderer):
    """Draws the board with coloured character cells."""

    def __init__(self, stdscr, width, height):
        """
        Initialize the renderer.

        Args:
            stdscr: Curses window from ``curses.wrapper``
            width: Number of grid columns
            height: Number of grid rows
        """
        self.stdscr = stdscr
        self.cols = width
        self.rows = height
        self.board_width = 2 + width * (CELL_WIDTH + 2)
        self.board_height = 1 + height * (CELL_HEIGHT + 1)
        self.pairs = {}

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        self._init_colors()

    def _init_colors(self):
        """Register colour pairs for the board and every tile value."""
        if not curses.has_colors():
            return
        curses.start_color()
        rich = curses.COLORS >= 256

        def register(key, code, fallback):
            pair_id = len(self.pairs) + 1
            color = code if rich else fallback
            curses.init_pair(pair_id, TEXT_COLOR_CODE if rich else curses.COLOR_BLACK, color)
            self.pairs[key] = curses.color_pair(pair_id)

        register('board', BOARD_COLOR_CODE, curses.COLOR_YELLOW)
        register('empty', EMPTY_CELL_COLOR_CODE, curses.COLOR_WHITE)
        for index, (value, code) in enumerate(TILE_COLOR_CODES.items()):
            register(value, code, _FALLBACK_COLORS[index % len(_FALLBACK_COLORS)])
        logger.debug(f"Registered {len(self.pairs)} colour pairs (256 colours: {rich})")

    def draw(self, engine):
        """Render the board, the tiles and the HUD."""
        self.stdscr.erase()
        self._text(1, SCORE_TEMPLATE.format(engine.score()))
        self._draw_board()

        for tile in layout_frame(engine):
            self._draw_tile(tile.col, tile.row, tile.value, tile.scale)

        self._text(BOARD_TOP + self.board_height + 1, INSTRUCTIONS)
        status = engine.state()
        if status is GameStatus.WON:
            self._text(BOARD_TOP + self.board_height // 2, WON_TEXT)
        elif status is GameStatus.LOST:
            self._text(BOARD_TOP + self.board_height // 2, LOST_TEXT)

    def present(self):
        """Push the frame to the terminal."""
        self.stdscr.refresh()

    def cell_origin(self, col, row):
        """Character position of a cell's top-left corner."""
        x = 2 + col * (CELL_WIDTH + 2)
        y = BOARD_TOP + 1 + row * (CELL_HEIGHT + 1)
        return int(round(x)), int(round(y))

    def _draw_board(self):
        """Fill the board background and the empty cell slots."""
        board_attr = self.pairs.get('board', curses.A_REVERSE)
        for y in range(self.board_height):
            self._fill(BOARD_TOP + y, 0, self.board_width, board_attr)

        empty_attr = self.pairs.get('empty', curses.A_NORMAL)
        for col in range(self.cols):
            for row in range(self.rows):
                x, y = self.cell_origin(col, row)
                for dy in range(CELL_HEIGHT):
                    self._fill(y + dy, x, CELL_WIDTH, empty_attr)

    def _draw_tile(self, col, row, value, scale=1.0):
        """Draw one tile with its value centred."""
        x, y = self.cell_origin(col, row)
        width = max(1, int(round(CELL_WIDTH * scale)))
        x += (CELL_WIDTH - width) // 2
        attr = self.pairs.get(value, curses.A_REVERSE) | curses.A_BOLD

        for dy in range(CELL_HEIGHT):
            self._fill(y + dy, x, width, attr)

        label = str(value)
        if len(label) <= width:
            self._put(y + CELL_HEIGHT // 2, x + (width - len(label)) // 2, label, attr)

    def _fill(self, y, x, width, attr):
        self._put(y, x, ' ' * width, attr)

    def _text(self, y, text):
        """Write a line centred over the board."""
        x = max(0, (self.board_width - len(text)) // 2)
        self._put(y, x, text, curses.A_BOLD)

    def _put(self, y, x, text, attr):
        """Write text, clipped to the window."""
        max_y, max_x = self.stdscr.getmaxyx()
        if y < 0 or y >= max_y or x >= max_x:
            return
        text = text[:max(0, max_x - x - 1)]
        if text:
            try:
                self.stdscr.addstr(y, x, text, attr)
            except curses.error:
                # Writing the bottom-right cell raises after a successful write
                pass
