# core/engine.py  (pure rules, no pygame)
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import random
import numpy as np
from .interfaces import Cell, Coord, CellChange, Heading, HEADINGS, Outcome, StepResult
from .grid import Grid
from .snake_model import Snake

@dataclass
class GameState:
    grid: Grid
    snake: Snake
    heading: Heading
    win_condition: int
    outcome: Outcome = Outcome.IN_PROGRESS
    reason: Optional[str] = None
    step_count: int = 0

    @property
    def apples_eaten(self) -> int:
        return len(self.snake) - 1

    @property
    def food(self) -> Optional[Coord]:
        hits = np.argwhere(self.grid.cells == int(Cell.FOOD))
        return (int(hits[0][0]), int(hits[0][1])) if len(hits) else None

def new_game(size: int, win_condition: int, heading: Heading,
             rng: Optional[random.Random] = None) -> GameState:
    """Empty board, food at a random empty cell, then a one-segment snake at another."""
    if heading not in HEADINGS:
        raise ValueError(f"heading must be one of {HEADINGS}, got {heading}")
    grid = Grid(size, rng)
    grid.set(grid.find_random_empty_cell(), Cell.FOOD)
    snake = Snake()
    snake.spawn(grid.find_random_empty_cell(), grid)
    return GameState(grid=grid, snake=snake, heading=heading, win_condition=win_condition)

def step(state: GameState) -> StepResult:
    """Advance one tick in place. Terminal conditions come back as outcomes, not exceptions."""
    if state.outcome is not Outcome.IN_PROGRESS:
        raise RuntimeError(f"game already finished ({state.outcome.value}); reset before stepping")

    grid, snake = state.grid, state.snake
    hr, hc = snake.head
    dr, dc = state.heading
    nxt = (hr + dr, hc + dc)

    hit_wall = not grid.in_bounds(nxt)
    # tail is still on the board here, so chasing it into its own cell counts as a hit
    hit_self = not hit_wall and grid.get(nxt) == Cell.SNAKE
    all_eaten = len(snake) - 1 == state.win_condition

    if all_eaten:
        return _finish(state, Outcome.WON, "win")
    if hit_wall:
        return _finish(state, Outcome.LOST, "wall")
    if hit_self:
        return _finish(state, Outcome.LOST, "self")

    changes: List[CellChange] = []
    ate = grid.get(nxt) == Cell.FOOD

    snake.push_head(nxt)
    grid.set(nxt, Cell.SNAKE)
    changes.append((nxt, Cell.SNAKE))

    if ate:
        food = grid.find_random_empty_cell()
        grid.set(food, Cell.FOOD)
        changes.append((food, Cell.FOOD))
    else:
        last = snake.pop_tail()
        grid.set(last, Cell.EMPTY)
        changes.append((last, Cell.EMPTY))

    state.step_count += 1
    return StepResult(
        outcome=Outcome.IN_PROGRESS,
        reason=None,
        changes=tuple(changes),
        apples_eaten=state.apples_eaten,
        ate=ate,
    )

def _finish(state: GameState, outcome: Outcome, reason: str) -> StepResult:
    state.outcome, state.reason = outcome, reason
    return StepResult(outcome=outcome, reason=reason, apples_eaten=state.apples_eaten)
