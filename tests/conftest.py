# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw tests (no need for display mode)
    return pg.Surface((480, 508))

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(seed=7)

@pytest.fixture
def state_factory():
    """Build a GameState with an exact layout instead of random placement."""
    from core.engine import GameState
    from core.grid import Grid
    from core.interfaces import Cell, RIGHT
    from core.snake_model import Snake

    def make(segments, food=None, heading=RIGHT, size=10, win=5, seed=0):
        grid = Grid(size, random.Random(seed))
        snake = Snake(segments)
        for s in snake:
            grid.set(s, Cell.SNAKE)
        if food is not None:
            grid.set(food, Cell.FOOD)
        return GameState(grid=grid, snake=snake, heading=heading, win_condition=win)
    return make

@pytest.fixture
def assert_consistent():
    from core.interfaces import Cell, Outcome

    def check(state):
        assert len(state.snake) == state.grid.count(Cell.SNAKE)
        assert len(set(state.snake)) == len(state.snake)
        for seg in state.snake:
            assert state.grid.get(seg) == Cell.SNAKE
        segs = state.snake.segments()
        for a, b in zip(segs, segs[1:]):
            assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
        if state.outcome is Outcome.IN_PROGRESS:
            assert state.grid.count(Cell.FOOD) == 1
    return check
