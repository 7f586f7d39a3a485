"""Application-wide notification channel for note sync activity.

Failures are published here instead of interrupting the user with a blocking
alert; the GUI status bar and the CLI both subscribe. A bounded history keeps
recent events available for diagnostics.

Updates:
  v0.2.0 - 2026-10-16 - Track note sync operations and expose failure history.
  v0.1.0 - 2026-10-12 - Introduce notification hub with task tracking helpers.
"""
from __future__ import annotations

import logging
import threading
import time
import uuid
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger("notes_client.notifications")


class NotificationLevel(str, Enum):
    """Severity levels communicated to listeners."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class NotificationStatus(str, Enum):
    """High-level lifecycle stage for a task notification."""
    STARTED = "started"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class Notification:
    """Immutable payload describing a notification event."""
    id: uuid.UUID
    title: str
    message: str
    level: NotificationLevel
    status: NotificationStatus
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    task_id: str | None = None
    duration_ms: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a serialisable representation of the notification."""
        return {
            "id": str(self.id),
            "title": self.title,
            "message": self.message,
            "level": self.level.value,
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
            "task_id": self.task_id,
            "duration_ms": self.duration_ms,
            "metadata": dict(self.metadata),
        }


class NotificationSubscription:
    """Disposable handle that removes its callback when closed."""
    def __init__(
        self,
        center: NotificationCenter,
        callback: Callable[[Notification], None],
    ) -> None:
        self._center = center
        self._callback = callback
        self._closed = False

    def close(self) -> None:
        """Detach the stored callback if it is still active."""
        if self._closed:
            return
        self._closed = True
        self._center.unsubscribe(self._callback)

    def __enter__(self) -> NotificationSubscription:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class NotificationCenter:
    """Thread-safe publish/subscribe hub for sending notifications to listeners."""
    def __init__(self, history_limit: int = 200) -> None:
        self._subscribers: list[Callable[[Notification], None]] = []
        self._lock = threading.RLock()
        self._history: deque[Notification] = deque(maxlen=history_limit)

    def subscribe(self, callback: Callable[[Notification], None]) -> NotificationSubscription:
        """Register *callback* to receive future notifications."""
        with self._lock:
            self._subscribers.append(callback)
        return NotificationSubscription(self, callback)

    def unsubscribe(self, callback: Callable[[Notification], None]) -> None:
        """Remove a previously subscribed callback if present."""
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

    def publish(self, notification: Notification) -> None:
        """Deliver *notification* to all registered subscribers."""
        with self._lock:
            self._history.append(notification)
            subscribers = list(self._subscribers)

        logger.debug(
            "Notification event",
            extra={
                "title": notification.title,
                "status": notification.status.value,
                "level": notification.level.value,
                "task_id": notification.task_id,
            },
        )

        for callback in subscribers:
            try:
                callback(notification)
            except Exception:  # pragma: no cover - a broken listener must not block others
                logger.exception("Notification subscriber raised an exception")

    def history(self) -> tuple[Notification, ...]:
        """Return a snapshot of stored notifications."""
        with self._lock:
            return tuple(self._history)

    def failures(self) -> tuple[Notification, ...]:
        """Return stored notifications describing failed tasks."""
        with self._lock:
            return tuple(
                item for item in self._history if item.status is NotificationStatus.FAILED
            )

    def _emit(
        self,
        operation: str,
        message: str,
        *,
        level: NotificationLevel,
        status: NotificationStatus,
        task_id: str,
        started_at: float | None,
        metadata: dict[str, Any],
    ) -> None:
        duration_ms = None
        if started_at is not None:
            duration_ms = int((time.perf_counter() - started_at) * 1000)
        self.publish(
            Notification(
                id=uuid.uuid4(),
                title=operation,
                message=message,
                level=level,
                status=status,
                task_id=task_id,
                duration_ms=duration_ms,
                metadata=dict(metadata),
            )
        )

    @contextmanager
    def track_operation(
        self,
        operation: str,
        *,
        start_message: str,
        success_message: str,
        failure_message: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Iterator[None]:
        """Publish started/succeeded/failed events around a service round trip.

        The failure event carries ``"<failure_message>: <exception text>"`` and the
        exception is re-raised unchanged.
        """
        task_id = f"{operation}:{uuid.uuid4()}"
        details = dict(metadata or {})
        self._emit(
            operation,
            start_message,
            level=NotificationLevel.INFO,
            status=NotificationStatus.STARTED,
            task_id=task_id,
            started_at=None,
            metadata=details,
        )
        started_at = time.perf_counter()
        try:
            yield
        except Exception as exc:
            prefix = failure_message or f"Unable to {operation}"
            self._emit(
                operation,
                f"{prefix}: {exc}",
                level=NotificationLevel.ERROR,
                status=NotificationStatus.FAILED,
                task_id=task_id,
                started_at=started_at,
                metadata=details,
            )
            raise
        self._emit(
            operation,
            success_message,
            level=NotificationLevel.SUCCESS,
            status=NotificationStatus.SUCCEEDED,
            task_id=task_id,
            started_at=started_at,
            metadata=details,
        )


notification_center = NotificationCenter()


__all__ = [
    "NotificationCenter",
    "Notification",
    "NotificationLevel",
    "NotificationStatus",
    "NotificationSubscription",
    "notification_center",
]
