"""
Game Loop and Session Management for Sliding Tiles.

This module manages the main game loop and wires the engine to a
frontend (pygame window or curses terminal).
"""
import curses
import logging

import pygame

from slidingtiles.constants import NCOLS, NROWS
from slidingtiles.game.engine import GameEngine
from slidingtiles.ui.renderer import PygameRenderer
from slidingtiles.ui.terminal import CursesRenderer
from game.input_handler import PygameInputSource, CursesInputSource

logger = logging.getLogger(__name__)


class GameSession:  # pylint: disable=too-few-public-methods
    """
    Runs one game from first draw until quit.

    Attributes:
        engine: The GameEngine instance
        renderer: Renderer drawing each frame
        input_source: InputSource supplying events
        running: Whether the game loop is running
        frames: Number of frames drawn
    """

    def __init__(self, engine, renderer, input_source):
        """
        Initialize a GameSession.

        Args:
            engine: The GameEngine instance
            renderer: Renderer drawing each frame
            input_source: InputSource supplying events
        """
        self.engine = engine
        self.renderer = renderer
        self.input_source = input_source
        self.running = True
        self.frames = 0

    def run(self):
        """
        Run the main game loop.

        Polls block indefinitely while the board is settled and use a
        short timeout while an animation runs, so frames keep coming
        and the animation can end on its own.

        Returns:
            Final GameStatus
        """
        self._render_frame()

        while self.running:
            event = self.input_source.poll(self.engine.poll_timeout())
            self.running = self.engine.handle(event)
            if self.running:
                self._render_frame()

        logger.info(f"Session ended: {self.engine.state().name}, score {self.engine.score()}")
        return self.engine.state()

    def _render_frame(self):
        """Render a single frame."""
        self.renderer.draw(self.engine)
        self.renderer.present()
        self.frames += 1


def _create_engine(seed=None, duration_ms=None, poll_timeout_ms=None):
    """Build an engine with a fresh game using the given overrides."""
    kwargs = {'seed': seed}
    if duration_ms is not None:
        kwargs['duration_ms'] = duration_ms
    if poll_timeout_ms is not None:
        kwargs['poll_timeout_ms'] = poll_timeout_ms
    engine = GameEngine(**kwargs)
    engine.new_game()
    return engine


def start_pygame_game(seed=None, duration_ms=None, poll_timeout_ms=None, cell_size=None):
    """
    Play a game in a pygame window.

    Returns:
        Final GameStatus
    """
    pygame.init()
    engine = _create_engine(seed, duration_ms, poll_timeout_ms)
    if cell_size:
        renderer = PygameRenderer(NCOLS, NROWS, cell_size=cell_size)
    else:
        renderer = PygameRenderer(NCOLS, NROWS)

    session = GameSession(engine, renderer, PygameInputSource())
    try:
        return session.run()
    finally:
        renderer.close()


def start_terminal_game(seed=None, duration_ms=None, poll_timeout_ms=None):
    """
    Play a game in the terminal.

    Returns:
        Final GameStatus
    """
    def _run(stdscr):
        engine = _create_engine(seed, duration_ms, poll_timeout_ms)
        renderer = CursesRenderer(stdscr, NCOLS, NROWS)
        session = GameSession(engine, renderer, CursesInputSource(stdscr))
        return session.run()

    return curses.wrapper(_run)
