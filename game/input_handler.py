"""
Input Handler for Sliding Tiles.

This module turns raw keyboard events into InputEvents for the engine.
Each poll returns exactly one event; ``InputEvent.NONE`` means the poll
timed out or the key has no meaning in the game.
"""
import curses
from abc import ABC, abstractmethod

import pygame

from slidingtiles.constants import InputEvent


class InputSource(ABC):
    """Supplies one InputEvent per poll."""

    @abstractmethod
    def poll(self, timeout_ms=None):
        """
        Wait for the next event.

        Args:
            timeout_ms: Milliseconds to wait, or None to block until an event

        Returns:
            InputEvent
        """


class PygameInputSource(InputSource):
    """Reads key presses from the pygame event queue."""

    KEY_MAP = {
        pygame.K_UP: InputEvent.UP,
        pygame.K_DOWN: InputEvent.DOWN,
        pygame.K_LEFT: InputEvent.LEFT,
        pygame.K_RIGHT: InputEvent.RIGHT,
        pygame.K_w: InputEvent.UP,
        pygame.K_s: InputEvent.DOWN,
        pygame.K_a: InputEvent.LEFT,
        pygame.K_d: InputEvent.RIGHT,
        pygame.K_q: InputEvent.QUIT,
        pygame.K_ESCAPE: InputEvent.QUIT,
    }

    def poll(self, timeout_ms=None):
        """Wait for a pygame event and translate it."""
        if timeout_ms is None:
            event = pygame.event.wait()
        else:
            event = pygame.event.wait(timeout_ms)
        return self.translate(event)

    def translate(self, event):
        """
        Map a pygame event to an InputEvent.

        Args:
            event: pygame event (NOEVENT on timeout)

        Returns:
            InputEvent
        """
        if event.type == pygame.QUIT:
            return InputEvent.QUIT
        if event.type == pygame.KEYDOWN:
            return self.KEY_MAP.get(event.key, InputEvent.NONE)
        return InputEvent.NONE


class CursesInputSource(InputSource):
    """Reads key codes from a curses window."""

    KEY_MAP = {
        curses.KEY_UP: InputEvent.UP,
        curses.KEY_DOWN: InputEvent.DOWN,
        curses.KEY_LEFT: InputEvent.LEFT,
        curses.KEY_RIGHT: InputEvent.RIGHT,
        ord('w'): InputEvent.UP,
        ord('s'): InputEvent.DOWN,
        ord('a'): InputEvent.LEFT,
        ord('d'): InputEvent.RIGHT,
        ord('q'): InputEvent.QUIT,
    }

    def __init__(self, stdscr):
        """
        Initialize the input source.

        Args:
            stdscr: Curses window to read keys from
        """
        self.stdscr = stdscr
        self.stdscr.keypad(True)

    def poll(self, timeout_ms=None):
        """Wait for a key and translate it."""
        self.stdscr.timeout(-1 if timeout_ms is None else timeout_ms)
        return self.translate(self.stdscr.getch())

    def translate(self, key):
        """Map a curses key code to an InputEvent (-1 means timeout)."""
        return self.KEY_MAP.get(key, InputEvent.NONE)
