# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / rules
    grid_size: int = 10
    tick_ms: int = 300
    win_condition: int = 5               # apples to eat before the game is won
    initial_heading: Tuple[int, int] = (1, 0)   # down
    seed: Optional[int] = None

    # display loop
    fps: int = 60

    # render
    render_cell: int = 48
    render_title: str = "Snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True

    # game log (CSV, one row per status event)
    log_path: Optional[str] = None

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be >= 2, got {self.grid_size}")
        if self.tick_ms < 0:
            raise ValueError(f"tick_ms must be >= 0, got {self.tick_ms}")
        if self.win_condition < 1:
            raise ValueError(f"win_condition must be >= 1, got {self.win_condition}")
        # room for the full-length snake plus the food it is heading for
        if self.grid_size * self.grid_size < self.win_condition + 2:
            raise ValueError(
                f"a {self.grid_size}x{self.grid_size} grid cannot hold a snake of "
                f"{self.win_condition + 1} segments plus food"
            )
        if tuple(self.initial_heading) not in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            raise ValueError(f"initial_heading must be a unit axis vector, got {self.initial_heading}")
        if self.fps < 1:
            raise ValueError(f"fps must be >= 1, got {self.fps}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
