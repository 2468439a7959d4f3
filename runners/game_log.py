# runners/game_log.py
from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable, Optional
from core.interfaces import Outcome, StatusEvent

ALL_KEYS = ["step", "game", "status", "apples", "target", "reason"]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped, not fatal
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def make_status_logger(
    logger: Logger,
    step_getter: Callable[[], int],
    game_getter: Optional[Callable[[], int]] = None,
) -> Callable[[StatusEvent], None]:
    """
    Returns a StatusReporter that writes one row per status event.
    'step_getter' supplies the engine step count for the 'step' column.
    """
    def _on_status(event: StatusEvent) -> None:
        scalars = {
            "game": game_getter() if game_getter is not None else 0,
            "status": event.status.value,
            "apples": event.apples_eaten if event.apples_eaten is not None else "",
            "target": event.target if event.target is not None else "",
            "reason": event.reason or "",
        }
        logger.log(int(step_getter()), scalars)
        if event.status is not Outcome.IN_PROGRESS:
            logger.flush()
    return _on_status


def print_status(event: StatusEvent) -> None:
    print(f"[status] {event.text()}")


def fanout(*reporters: Optional[Callable[[StatusEvent], None]]) -> Callable[[StatusEvent], None]:
    active = [r for r in reporters if r is not None]
    def _report(event: StatusEvent) -> None:
        for r in active:
            r(event)
    return _report
