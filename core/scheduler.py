# core/scheduler.py
from __future__ import annotations
import time
from typing import Callable, Optional

class MonotonicClock:
    def now_ms(self) -> float:
        return time.perf_counter() * 1000.0

class ManualClock:
    """Deterministic clock for tests and headless runs."""
    def __init__(self, start_ms: float = 0.0):
        self.t = float(start_ms)
    def now_ms(self) -> float:
        return self.t
    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("clock cannot go backwards")
        self.t += ms
        return self.t

class TickScheduler:
    """
    Throttles a high-frequency callback (one per frame) down to one step per interval.
    The first timestamp arms the reference; a step runs once more than interval_ms has
    passed since the last applied step.
    """
    def __init__(self, interval_ms: float, on_tick: Callable[[float], None]):
        if interval_ms < 0:
            raise ValueError(f"interval_ms must be >= 0, got {interval_ms}")
        self.interval_ms = float(interval_ms)
        self.on_tick = on_tick
        self._last: Optional[float] = None
        self.ticks = 0

    def reset(self) -> None:
        self._last = None
        self.ticks = 0

    @property
    def last_tick_ms(self) -> Optional[float]:
        return self._last

    def maybe_tick(self, timestamp: float) -> bool:
        if self._last is None:
            self._last = timestamp
        if timestamp - self._last > self.interval_ms:
            self._last = timestamp
            self.ticks += 1
            self.on_tick(timestamp)
            return True
        return False
