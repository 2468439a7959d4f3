# core/game.py
from __future__ import annotations
from typing import Optional
import random
from config import AppConfig
from .interfaces import Heading, Outcome, RenderSink, StatusEvent, StatusReporter, StepResult
from .engine import GameState, new_game, step
from .input_mapper import InputMapper
from .scheduler import TickScheduler

class SnakeGame:
    """
    One play session: owns the GameState, gates engine steps through the scheduler,
    and pushes diffs/status to whatever sink and reporter are attached.
    """
    def __init__(
        self,
        cfg: AppConfig,
        render_sink: Optional[RenderSink] = None,
        status_reporter: Optional[StatusReporter] = None,
        rng: Optional[random.Random] = None,
    ):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.sink = render_sink
        self.reporter = status_reporter
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.scheduler = TickScheduler(cfg.tick_ms, self._on_tick)
        self.state: Optional[GameState] = None
        self.mapper: Optional[InputMapper] = None
        self.last_result: Optional[StepResult] = None

    # lifecycle
    def reset(self) -> GameState:
        self.state = new_game(self.cfg.grid_size, self.cfg.win_condition,
                              tuple(self.cfg.initial_heading), self.rng)
        self.mapper = InputMapper(self.state)
        self.scheduler.reset()
        self.last_result = None
        if self.sink is not None:
            self.sink.render_full(self.state.grid.snapshot())
            self.sink.set_status("In progress...")
        return self.state

    start = reset

    @property
    def is_running(self) -> bool:
        return self.state is not None and self.state.outcome is Outcome.IN_PROGRESS

    @property
    def outcome(self) -> Optional[Outcome]:
        return self.state.outcome if self.state is not None else None

    @property
    def apples_eaten(self) -> int:
        return self.state.apples_eaten if self.state is not None else 0

    # input
    def on_direction(self, heading: Heading) -> bool:
        if self.mapper is None:
            return False
        return self.mapper.on_direction(heading)

    # clock
    def advance(self, timestamp: float) -> bool:
        """Called once per frame. Returns False once the game has ended."""
        if not self.is_running:
            return False
        self.scheduler.maybe_tick(timestamp)
        return self.is_running

    def _on_tick(self, timestamp: float) -> None:
        res = step(self.state)
        self.last_result = res
        if self.sink is not None and res.changes:
            self.sink.apply_diff(res.changes)
        event = self._status_for(res)
        if self.sink is not None:
            self.sink.set_status(event.text())
        if self.reporter is not None:
            self.reporter(event)

    def _status_for(self, res: StepResult) -> StatusEvent:
        if res.outcome is Outcome.WON:
            return StatusEvent.won()
        if res.outcome is Outcome.LOST:
            return StatusEvent.lost(res.reason)
        return StatusEvent.playing(res.apples_eaten, self.cfg.win_condition)
