# runners/run_headless.py
from __future__ import annotations
import random
from typing import Optional
from config import AppConfig
from core.game import SnakeGame
from core.interfaces import HEADINGS, StatusEvent, opposite
from core.scheduler import ManualClock
from viz.renderer_headless import HeadlessRenderer
from runners.game_log import CSVLogger, ALL_KEYS, make_status_logger, fanout

def random_turn(rng: random.Random, heading):
    """Keep going most of the time, otherwise pick a perpendicular heading."""
    if rng.random() < 0.7:
        return heading
    return rng.choice([h for h in HEADINGS if h != heading and h != opposite(heading)])

def main(cfg: Optional[AppConfig] = None, max_steps: int = 200, frame_ms: float = 1000.0 / 60,
         show_board: bool = True) -> StatusEvent | None:
    """Plays one game on a manual clock with random turns; prints the board and result."""
    cfg = cfg or AppConfig()
    rend = HeadlessRenderer()
    rend.open(cfg)
    clock = ManualClock()
    turn_rng = random.Random(cfg.seed)

    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else None
    events: list[StatusEvent] = []
    game = SnakeGame(cfg, render_sink=rend)
    log_status = None
    if logger is not None:
        log_status = make_status_logger(logger, step_getter=lambda: game.state.step_count)
    game.reporter = fanout(events.append, log_status)
    game.start()

    try:
        while game.is_running and game.scheduler.ticks < max_steps:
            before = game.scheduler.ticks
            if not game.advance(clock.advance(frame_ms)):
                break
            if game.scheduler.ticks != before:
                game.on_direction(random_turn(turn_rng, game.state.heading))
    finally:
        if logger is not None:
            logger.close()

    last = events[-1] if events else None
    if show_board:
        print("\n".join(rend.to_ascii()))
    print(f"steps={game.state.step_count} apples={game.apples_eaten}/{cfg.win_condition} "
          f"status={last.text() if last else 'In progress...'} reason={game.state.reason or ''}")
    return last
