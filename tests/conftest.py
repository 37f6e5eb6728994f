"""Pytest configuration and shared fixtures for testing."""
import pytest

from slidingtiles.constants import NCOLS, NROWS
from slidingtiles.core.game_state import GameState
from slidingtiles.game.engine import GameEngine


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start=100.0):
        self.now = start

    def advance_ms(self, ms):
        self.now += ms / 1000.0

    def __call__(self):
        return self.now


def columns_from_rows(rows):
    """Convert a list of rows (top first) to the grid's [column][row] layout."""
    return [[rows[y][x] for y in range(NROWS)] for x in range(NCOLS)]


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def state_from_rows():
    """Factory building a GameState from a list of rows."""
    def _make(rows, score=0, seed=0):
        return GameState.from_values(columns_from_rows(rows), score=score, seed=seed)
    return _make


@pytest.fixture
def single_row_state(state_from_rows):
    """Factory for a game where only the top row holds tiles."""
    def _make(top_row, **kwargs):
        rows = [list(top_row)] + [[0] * NCOLS for _ in range(NROWS - 1)]
        return state_from_rows(rows, **kwargs)
    return _make


@pytest.fixture
def locked_rows():
    """A full board with no two equal neighbours."""
    return [[2 if (x + y) % 2 == 0 else 4 for x in range(NCOLS)] for y in range(NROWS)]


@pytest.fixture
def locked_state(state_from_rows, locked_rows):
    """A game that cannot make any move."""
    return state_from_rows(locked_rows)


@pytest.fixture
def engine_factory(clock):
    """Factory for an engine on a given game state using the fake clock."""
    def _make(game_state, duration_ms=500, poll_timeout_ms=10):
        return GameEngine(game_state, duration_ms=duration_ms,
                          poll_timeout_ms=poll_timeout_ms, clock=clock)
    return _make
