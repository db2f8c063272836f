from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from .constants import ACTIVITY_LIMIT, ERROR_LOG_PATH

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class AppEvent:
    timestamp: str
    action: str
    entity_type: str
    entity_id: str
    details: str = ""


class ActivityLog:
    """In-memory record of store mutations, newest last."""

    def __init__(self, limit: int = ACTIVITY_LIMIT):
        self.limit = limit
        self._events: list[AppEvent] = []

    def add_event(self, event: AppEvent) -> None:
        self._events.append(event)
        # Keep only the most recent entries.
        if len(self._events) > self.limit:
            del self._events[: len(self._events) - self.limit]

    def list_events(self, limit: int = ACTIVITY_LIMIT) -> list[AppEvent]:
        return self._events[-limit:]

    def actions(self) -> list[str]:
        return sorted({e.action for e in self._events})

    def __len__(self) -> int:
        return len(self._events)


class ErrorLogger:
    def __init__(self, path: Path = ERROR_LOG_PATH):
        self.path = path

    def log_exception(self, exc: BaseException, context: str = "") -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        ts = now_ts()
        with self.path.open("a", encoding="utf-8") as f:
            f.write(f"[{ts}] {context}\n")
            f.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
            f.write("\n")


def configure_logging(path: Path = ERROR_LOG_PATH, level: int = logging.INFO) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(filename=str(path), level=level, format=LOG_FORMAT)


def now_ts() -> str:
    return datetime.now().isoformat(timespec="seconds")


def today() -> str:
    return date.today().isoformat()
