"""Non-blocking user notifications, delivered through a queue side channel.

The orchestrator pushes notifications here instead of talking to a UI;
whatever presents results drains the queue and shows them as toasts,
console lines, and so on.
"""

from __future__ import annotations

from collections import deque
from enum import StrEnum

import structlog
from pydantic import BaseModel, ConfigDict

logger = structlog.get_logger()


class NotificationLevel(StrEnum):
    """Fallbacks are reported as success or info; failures raise instead."""

    SUCCESS = "success"
    INFO = "info"


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: NotificationLevel
    title: str
    description: str = ""
    duration_ms: int | None = None


class NotificationQueue:
    """FIFO of notifications waiting to be shown."""

    def __init__(self) -> None:
        self._pending: deque[Notification] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def push(self, notification: Notification) -> None:
        logger.debug(
            "notification",
            level=notification.level.value,
            title=notification.title,
            description=notification.description,
        )
        self._pending.append(notification)

    def success(self, title: str, description: str = "", duration_ms: int | None = None) -> None:
        self.push(
            Notification(
                level=NotificationLevel.SUCCESS,
                title=title,
                description=description,
                duration_ms=duration_ms,
            )
        )

    def info(self, title: str, description: str = "", duration_ms: int | None = None) -> None:
        self.push(
            Notification(
                level=NotificationLevel.INFO,
                title=title,
                description=description,
                duration_ms=duration_ms,
            )
        )

    def drain(self) -> list[Notification]:
        """Remove and return everything queued so far, oldest first."""
        items = list(self._pending)
        self._pending.clear()
        return items
