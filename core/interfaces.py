# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Tuple, Dict, Any, Protocol, Optional, Sequence
import numpy as np

Coord = Tuple[int, int]     # (row, col)
Heading = Tuple[int, int]   # (d_row, d_col)

UP: Heading = (-1, 0)
DOWN: Heading = (1, 0)
LEFT: Heading = (0, -1)
RIGHT: Heading = (0, 1)
HEADINGS: Tuple[Heading, ...] = (UP, DOWN, LEFT, RIGHT)
HEADING_NAMES: Dict[Heading, str] = {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}

def opposite(h: Heading) -> Heading:
    return (-h[0], -h[1])

def heading_from_name(name: str) -> Heading:
    for h, n in HEADING_NAMES.items():
        if n == name.strip().lower():
            return h
    raise ValueError(f"unknown heading: {name!r}")

class Cell(IntEnum):
    EMPTY = 0
    FOOD = 1
    SNAKE = 2

class Outcome(str, Enum):
    IN_PROGRESS = "playing"
    WON = "won"
    LOST = "lost"

CellChange = Tuple[Coord, Cell]

@dataclass(frozen=True)
class StepResult:
    outcome: Outcome
    reason: Optional[str]                     # "wall" | "self" | "win" | None
    changes: Tuple[CellChange, ...] = ()      # in application order
    apples_eaten: int = 0
    ate: bool = False

    @property
    def terminated(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

@dataclass(frozen=True)
class StatusEvent:
    status: Outcome
    apples_eaten: Optional[int] = None
    target: Optional[int] = None
    reason: Optional[str] = field(default=None, compare=False)

    @classmethod
    def playing(cls, apples_eaten: int, target: int) -> "StatusEvent":
        return cls(Outcome.IN_PROGRESS, apples_eaten, target)

    @classmethod
    def won(cls) -> "StatusEvent":
        return cls(Outcome.WON, reason="win")

    @classmethod
    def lost(cls, reason: Optional[str] = None) -> "StatusEvent":
        return cls(Outcome.LOST, reason=reason)

    def text(self) -> str:
        if self.status is Outcome.WON:
            return "Congratulations!"
        if self.status is Outcome.LOST:
            return "Game over! Try again."
        return f"Apples: {self.apples_eaten} of {self.target}"

    def as_dict(self) -> Dict[str, Any]:
        if self.status is Outcome.IN_PROGRESS:
            return {"status": self.status.value, "applesEaten": self.apples_eaten, "target": self.target}
        return {"status": self.status.value}

class RenderSink(Protocol):
    def render_full(self, cells: np.ndarray) -> None: ...
    def apply_diff(self, changes: Sequence[CellChange]) -> None: ...
    def set_status(self, text: str) -> None: ...

class StatusReporter(Protocol):
    def __call__(self, event: StatusEvent) -> None: ...

class Clock(Protocol):
    def now_ms(self) -> float: ...
