"""Tests for the pygame and curses renderers."""
import curses
from unittest.mock import Mock, patch

import pygame
import pytest

from slidingtiles.constants import (
    FALLBACK_TILE_COLOR, LOST_COLOR, LOST_TEXT, NCOLS, NROWS, WON_TEXT,
    InputEvent,
)
from slidingtiles.ui.renderer import PygameRenderer
from slidingtiles.ui.terminal import CursesRenderer


@pytest.fixture
def pygame_init(monkeypatch):
    """Initialize pygame with a headless display."""
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    yield
    pygame.quit()


class TestPygameRenderer:
    """Drawing frames into a pygame surface."""

    @pytest.fixture
    def renderer(self, pygame_init):
        return PygameRenderer(NCOLS, NROWS)

    def _color_at(self, renderer, col, row):
        """Colour just inside the top-left corner of a (fractional) cell."""
        x, y = renderer.cell_origin(col, row)
        return renderer.screen.get_at((int(x) + 2, int(y) + 2))

    def _mapped(self, renderer, color):
        return renderer.screen.unmap_rgb(renderer.screen.map_rgb(color))

    def test_window_size_fits_board(self, renderer):
        width, height = renderer.screen.get_size()
        assert width == renderer.board_width
        assert height > renderer.board_height

    def test_draws_animating_frame(self, renderer, single_row_state,
                                   engine_factory, clock):
        engine = engine_factory(single_row_state([2, 2, 4096, 0, 0], seed=3))
        engine.handle(InputEvent.LEFT)
        clock.advance_ms(250)

        renderer.draw(engine)
        renderer.present()

        # 4096 has no palette entry and is halfway between columns 2 and 1
        assert self._color_at(renderer, 1.5, 0) == self._mapped(renderer, FALLBACK_TILE_COLOR)

    def test_lost_banner(self, renderer, locked_state, engine_factory):
        engine = engine_factory(locked_state)
        engine.handle(InputEvent.DOWN)
        with patch.object(renderer, '_draw_banner') as banner:
            renderer.draw(engine)
        banner.assert_called_once_with(LOST_TEXT, LOST_COLOR)

    def test_no_banner_while_playing(self, renderer, single_row_state, engine_factory):
        engine = engine_factory(single_row_state([2, 0, 0, 0, 0]))
        with patch.object(renderer, '_draw_banner') as banner:
            renderer.draw(engine)
        banner.assert_not_called()


class TestCursesRenderer:
    """Drawing frames into a mocked curses window."""

    @pytest.fixture
    def stdscr(self):
        screen = Mock()
        screen.getmaxyx.return_value = (40, 80)
        return screen

    @pytest.fixture
    def renderer(self, stdscr):
        with patch('slidingtiles.ui.terminal.curses.curs_set'), \
                patch('slidingtiles.ui.terminal.curses.has_colors', return_value=False):
            return CursesRenderer(stdscr, NCOLS, NROWS)

    def _writes(self, stdscr):
        return [c.args[:3] for c in stdscr.addstr.call_args_list]

    def test_cursor_failure_is_tolerated(self, stdscr):
        with patch('slidingtiles.ui.terminal.curses.curs_set',
                   side_effect=curses.error("no cursor control")), \
                patch('slidingtiles.ui.terminal.curses.has_colors', return_value=False):
            renderer = CursesRenderer(stdscr, NCOLS, NROWS)
        assert renderer.pairs == {}

    def test_won_frame_layout(self, renderer, stdscr, single_row_state, engine_factory):
        engine = engine_factory(single_row_state([1024, 1024, 0, 0, 0], seed=9))
        engine.handle(InputEvent.LEFT)
        engine.animation.finish()

        renderer.draw(engine)
        writes = self._writes(stdscr)

        # Score centred above the 42-column board
        assert (1, 15, "Score: 2048") in writes
        # Tile label centred in the first 6x3 cell
        assert (4, 3, "2048") in writes
        # Banner across the middle of the board
        assert (10, 17, WON_TEXT) in writes

    def test_lost_banner(self, renderer, stdscr, locked_state, engine_factory):
        engine = engine_factory(locked_state)
        engine.handle(InputEvent.DOWN)
        renderer.draw(engine)
        assert (10, 16, LOST_TEXT) in self._writes(stdscr)

    def test_writes_are_clipped(self, renderer, stdscr, single_row_state, engine_factory):
        stdscr.getmaxyx.return_value = (5, 10)
        renderer.draw(engine_factory(single_row_state([2, 0, 0, 0, 0])))
        for y, x, text in self._writes(stdscr):
            assert y < 5
            assert x + len(text) < 10

    def test_present_refreshes(self, renderer, stdscr):
        renderer.present()
        stdscr.refresh.assert_called_once()
