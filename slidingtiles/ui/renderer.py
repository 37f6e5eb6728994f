"""
Pygame rendering for the sliding tile board.
"""
import pygame

from slidingtiles.constants import (
    CELL_SIZE, CELL_GAP, HEADER_HEIGHT, FOOTER_HEIGHT,
    BOARD_COLOR, EMPTY_CELL_COLOR, BACKGROUND_COLOR, TEXT_COLOR,
    HUD_TEXT_COLOR, WON_COLOR, LOST_COLOR, FALLBACK_TILE_COLOR, TILE_COLORS,
    SCORE_TEMPLATE, INSTRUCTIONS, WON_TEXT, LOST_TEXT, GameStatus,
)
from slidingtiles.ui.base import Renderer, layout_frame


class PygameRenderer(Renderer):
    """Handles all Pygame rendering."""

    def __init__(self, width, height, cell_size=CELL_SIZE):
        """
        Initialize the renderer.

        Args:
            width: Number of grid columns
            height: Number of grid rows
            cell_size: Tile edge length in pixels
        """
        self.cols = width
        self.rows = height
        self.cell_size = cell_size

        # Initialize Pygame if not already initialized
        if not pygame.get_init():
            pygame.init()

        self.board_width = width * (cell_size + CELL_GAP) + CELL_GAP
        self.board_height = height * (cell_size + CELL_GAP) + CELL_GAP
        screen_width = self.board_width
        screen_height = HEADER_HEIGHT + self.board_height + FOOTER_HEIGHT
        self.screen = pygame.display.set_mode((screen_width, screen_height))
        pygame.display.set_caption("Sliding Tiles")

        self.hud_font = pygame.font.Font(None, 32)
        self.banner_font = pygame.font.Font(None, 56)
        self.tile_fonts = {}

    def draw(self, engine):
        """Render the board, the tiles and the HUD."""
        self.screen.fill(BACKGROUND_COLOR)
        self._draw_board()

        for tile in layout_frame(engine):
            self._draw_tile(tile.col, tile.row, tile.value, tile.scale)

        self._draw_hud(engine.score(), engine.state())

    def present(self):
        """Flip the display buffer."""
        pygame.display.flip()

    def close(self):
        """Shut down the display."""
        pygame.quit()

    def cell_origin(self, col, row):
        """Pixel position of a cell's top-left corner (fractional cells allowed)."""
        x = CELL_GAP + col * (self.cell_size + CELL_GAP)
        y = HEADER_HEIGHT + CELL_GAP + row * (self.cell_size + CELL_GAP)
        return x, y

    def _draw_board(self):
        """Draw the board background and the empty cell slots."""
        board_rect = pygame.Rect(0, HEADER_HEIGHT, self.board_width, self.board_height)
        pygame.draw.rect(self.screen, BOARD_COLOR, board_rect)

        for col in range(self.cols):
            for row in range(self.rows):
                x, y = self.cell_origin(col, row)
                rect = pygame.Rect(int(x), int(y), self.cell_size, self.cell_size)
                pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, rect)

    def _draw_tile(self, col, row, value, scale=1.0):
        """Draw one tile, shrunk around its centre while it appears."""
        size = max(1, int(self.cell_size * scale))
        x, y = self.cell_origin(col, row)
        offset = (self.cell_size - size) / 2
        rect = pygame.Rect(int(x + offset), int(y + offset), size, size)

        color = TILE_COLORS.get(value, FALLBACK_TILE_COLOR)
        pygame.draw.rect(self.screen, color, rect)

        if size < self.cell_size // 3:
            return

        text_color = TEXT_COLOR if value in TILE_COLORS else HUD_TEXT_COLOR
        font = self._tile_font(value, size)
        text = font.render(str(value), True, text_color)
        self.screen.blit(text, text.get_rect(center=rect.center))

    def _tile_font(self, value, size):
        """Font sized so the number fits its tile."""
        digits = len(str(value))
        font_size = max(12, int(size * (0.6 if digits < 3 else 0.45 if digits < 4 else 0.35)))
        if font_size not in self.tile_fonts:
            self.tile_fonts[font_size] = pygame.font.Font(None, font_size)
        return self.tile_fonts[font_size]

    def _draw_hud(self, score, status):
        """Draw score, instructions and the outcome banner."""
        score_text = self.hud_font.render(SCORE_TEMPLATE.format(score), True, HUD_TEXT_COLOR)
        self.screen.blit(score_text, score_text.get_rect(
            center=(self.board_width // 2, HEADER_HEIGHT // 2)))

        footer_y = HEADER_HEIGHT + self.board_height + FOOTER_HEIGHT // 2
        help_text = self.hud_font.render(INSTRUCTIONS, True, HUD_TEXT_COLOR)
        self.screen.blit(help_text, help_text.get_rect(center=(self.board_width // 2, footer_y)))

        if status is GameStatus.WON:
            self._draw_banner(WON_TEXT, WON_COLOR)
        elif status is GameStatus.LOST:
            self._draw_banner(LOST_TEXT, LOST_COLOR)

    def _draw_banner(self, text, color):
        """Draw an outcome message over the middle of the board."""
        banner = self.banner_font.render(text, True, color, BACKGROUND_COLOR)
        center = (self.board_width // 2, HEADER_HEIGHT + self.board_height // 2)
        self.screen.blit(banner, banner.get_rect(center=center))
