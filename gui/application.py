"""Qt application helpers for the notes client GUI.

Updates:
  v0.1.1 - 2026-10-18 - Detect display server before forcing offscreen backend.
  v0.1.0 - 2026-10-14 - Provide QApplication factory and launch routine.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, cast

from PySide6.QtWidgets import QApplication, QStyleFactory

from .main_window import MainWindow

if TYPE_CHECKING:
    from collections.abc import MutableMapping, Sequence

    from config import NotesClientSettings
    from core import NotesWorkspace

_DISPLAY_ENV_VARS = ("DISPLAY", "WAYLAND_DISPLAY", "MIR_SOCKET")
logger = logging.getLogger("notes_client.gui.application")


def _should_force_offscreen(env: MutableMapping[str, str]) -> bool:
    """Return True when we should default Qt to the offscreen platform plugin."""
    if env.get("QT_QPA_PLATFORM"):
        return False

    if sys.platform.startswith(("win", "cygwin")) or sys.platform == "darwin":
        return False

    return not any(env.get(var) for var in _DISPLAY_ENV_VARS)


def create_qapplication(argv: Sequence[str] | None = None) -> QApplication:
    """Return an existing QApplication or create a new one with sensible defaults."""
    existing = QApplication.instance()
    if existing is not None:
        return cast(QApplication, existing)

    if _should_force_offscreen(os.environ):
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

    app = QApplication(list(argv or []))
    fusion = QStyleFactory.create("Fusion")
    if fusion is not None:
        app.setStyle(fusion)
    logger.debug("GUI_STYLE active_style=%s", app.style().metaObject().className())
    return app


def launch_notes_client(
    workspace: NotesWorkspace, settings: NotesClientSettings | None = None
) -> int:
    """Create the Qt event loop, show the main window, and enter the GUI."""
    app = create_qapplication()
    window = MainWindow(workspace, settings=settings)
    window.show()
    return app.exec()


__all__ = ["create_qapplication", "launch_notes_client"]
