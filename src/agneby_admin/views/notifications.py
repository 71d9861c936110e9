"""
views/notifications.py — transient user notifications (the toast host).

Views queue notifications while they work; the HTTP layer drains them
into the ``notifications`` array of the response envelope.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

Level = Literal["success", "info", "error"]


@dataclass(frozen=True)
class Notification:
    level: Level
    title: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


class Notifier:
    def __init__(self) -> None:
        self._queue: list[Notification] = []

    def success(self, title: str, description: str | None = None) -> None:
        self._queue.append(Notification("success", title, description))

    def info(self, title: str, description: str | None = None) -> None:
        self._queue.append(Notification("info", title, description))

    def error(self, title: str, description: str | None = None) -> None:
        self._queue.append(Notification("error", title, description))

    @property
    def pending(self) -> list[Notification]:
        return list(self._queue)

    def drain(self) -> list[dict[str, Any]]:
        items, self._queue = self._queue, []
        return [n.to_dict() for n in items]
