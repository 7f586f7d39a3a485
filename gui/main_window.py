"""Main window for the notes client GUI.

Updates:
  v0.2.0 - 2026-10-18 - Show sync notifications in the status bar and add an activity log.
  v0.1.0 - 2026-10-14 - Host the notes panel and trigger the initial load on show.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow

from core.notifications import NotificationStatus, notification_center

from .async_runner import AsyncRunner
from .notes_panel import NotesPanel
from .notifications import ActivityLogDialog, QtNotificationBridge

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from PySide6.QtGui import QCloseEvent, QShowEvent

    from config import NotesClientSettings
    from core import NotesWorkspace
    from core.notifications import Notification, NotificationCenter

logger = logging.getLogger("notes_client.gui.main_window")


class MainWindow(QMainWindow):
    """Top-level window showing the note cards."""

    def __init__(
        self,
        workspace: NotesWorkspace,
        settings: NotesClientSettings | None = None,
        *,
        notifications: NotificationCenter | None = None,
        runner: AsyncRunner | None = None,
    ) -> None:
        super().__init__()
        self._workspace = workspace
        self._notifications = notifications or notification_center
        self._runner = runner or AsyncRunner(self)
        self._mounted = False
        self.setWindowTitle(settings.window_title if settings is not None else "Notes")
        self.resize(900, 640)

        self._panel = NotesPanel(
            workspace,
            self._runner,
            self,
            status_callback=self._show_status,
        )
        self.setCentralWidget(self._panel)

        activity_action = QAction("Activity", self)
        activity_action.triggered.connect(self.show_activity_log)  # type: ignore[arg-type]
        self.menuBar().addAction(activity_action)

        self._bridge = QtNotificationBridge(self._notifications, self)
        self._bridge.notification_received.connect(self._on_notification)  # type: ignore[arg-type]

    @property
    def panel(self) -> NotesPanel:
        return self._panel

    def showEvent(self, event: QShowEvent) -> None:  # noqa: N802 - Qt naming
        super().showEvent(event)
        if not self._mounted:
            self._mounted = True
            self._panel.load()

    def _on_notification(self, notification: Notification) -> None:
        duration = 0 if notification.status is NotificationStatus.STARTED else 5000
        self._show_status(notification.message, duration)

    def _show_status(self, message: str, duration_ms: int = 3000) -> None:
        self.statusBar().showMessage(message, duration_ms)

    def show_activity_log(self) -> None:
        dialog = ActivityLogDialog(self._notifications.history(), self)
        dialog.exec()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt naming
        self._bridge.close()
        self._runner.shutdown()
        super().closeEvent(event)


__all__ = ["MainWindow"]
