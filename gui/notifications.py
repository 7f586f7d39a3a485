"""Qt helpers for surfacing note sync notifications in the GUI.

Updates: v0.2.0 - 2026-10-18 - Add activity log dialog listing recent sync events.
Updates: v0.1.0 - 2026-10-14 - Introduce notification bridge for the status bar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from core.notifications import Notification, NotificationCenter, NotificationStatus

if TYPE_CHECKING:
    from collections.abc import Sequence


def format_notification(notification: Notification, *, include_metadata: bool = False) -> str:
    """Return a one-line summary of *notification* for lists and the status bar."""
    timestamp = notification.timestamp.astimezone().strftime("%H:%M:%S")
    text = f"[{timestamp}] {notification.message}"
    if notification.duration_ms is not None:
        text += f" ({notification.duration_ms} ms)"
    if include_metadata and notification.metadata:
        details = ", ".join(f"{key}={value}" for key, value in notification.metadata.items())
        text += f" {{{details}}}"
    return text


class QtNotificationBridge(QObject):
    """Subscribe to core notifications and forward them via Qt signals.

    Notifications are published from the background loop thread; the queued
    signal delivers them on the GUI thread.
    """

    notification_received: Signal = Signal(object)

    def __init__(self, center: NotificationCenter, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._subscription = center.subscribe(self._forward)

    def _forward(self, notification: Notification) -> None:
        self.notification_received.emit(notification)

    def close(self) -> None:
        self._subscription.close()


class ActivityLogDialog(QDialog):
    """Dialog presenting recent note sync events, newest first."""

    def __init__(self, notifications: Sequence[Notification], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Activity")
        self.resize(520, 360)

        layout = QVBoxLayout(self)
        self._list = QListWidget(self)
        layout.addWidget(self._list)

        for notification in reversed(list(notifications)):
            if notification.status is NotificationStatus.STARTED:
                continue
            item = QListWidgetItem(format_notification(notification))
            item.setData(Qt.ItemDataRole.UserRole, notification)
            if notification.status is NotificationStatus.FAILED:
                item.setForeground(Qt.GlobalColor.red)
            self._list.addItem(item)

        button_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Close, self)
        copy_button = button_box.addButton("Copy Details", QDialogButtonBox.ButtonRole.ActionRole)
        copy_button.clicked.connect(self._copy_selected)  # type: ignore[arg-type]
        button_box.rejected.connect(self.reject)  # type: ignore[arg-type]
        layout.addWidget(button_box)

    def entry_count(self) -> int:
        return self._list.count()

    def _copy_selected(self) -> None:
        selected = self._list.currentItem()
        if selected is None:
            return
        notification: Notification = selected.data(Qt.ItemDataRole.UserRole)
        QGuiApplication.clipboard().setText(
            format_notification(notification, include_metadata=True)
        )


__all__ = ["ActivityLogDialog", "QtNotificationBridge", "format_notification"]
