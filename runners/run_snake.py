# runners/run_snake.py
from typing import Optional
from config import AppConfig
from core.game import SnakeGame
from core.interfaces import Outcome
from viz.renderer_pygame import PygameRenderer
from viz.keyboard import Keyboard
from viz.clock import PygameClock
from runners.game_log import CSVLogger, ALL_KEYS, make_status_logger, print_status, fanout

def main(cfg: Optional[AppConfig] = None):
    """Human play: arrows steer, space/enter (re)starts once a game is over, esc quits."""
    cfg = cfg or AppConfig()

    rend = PygameRenderer()
    rend.open(cfg)
    clock = PygameClock()
    kbd = Keyboard()

    games_played = 0
    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else None
    game = SnakeGame(cfg, render_sink=rend)
    log_status = None
    if logger is not None:
        log_status = make_status_logger(
            logger,
            step_getter=lambda: game.state.step_count if game.state else 0,
            game_getter=lambda: games_played,
        )

    def _report(event):
        if event.status is not Outcome.IN_PROGRESS:
            print_status(event)
    game.reporter = fanout(_report, log_status)

    game.start()
    games_played += 1
    quit_requested = False
    try:
        while not quit_requested:
            for cmd in kbd.poll():
                if cmd == "quit":
                    quit_requested = True
                elif cmd == "start":
                    # start is ignored while a game is on
                    if not game.is_running:
                        game.start()
                        games_played += 1
                else:
                    game.on_direction(cmd)
            game.advance(clock.now_ms())
            rend.tick(cfg.fps)
    finally:
        if logger is not None:
            logger.close()
        rend.close()
    print(f"played {games_played} game(s), last: {game.outcome.value if game.outcome else '-'}")
