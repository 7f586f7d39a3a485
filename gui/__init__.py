"""GUI module namespace for the notes client.

Updates: v0.2.0 - 2026-10-18 - Handle missing PySide6 dependency with friendly error.
Updates: v0.1.0 - 2026-10-14 - Expose PySide6 launcher utilities for the notes UI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config import NotesClientSettings
    from core import NotesWorkspace


class GuiDependencyError(RuntimeError):
    """Raised when the GUI cannot start because PySide6 is absent."""


_MISSING_PYSIDE6_MESSAGE = (
    "PySide6 is not installed. Install the project with `pip install -e .` "
    "before launching the GUI, or rerun with --no-gui."
)

try:
    from .application import create_qapplication, launch_notes_client
except ModuleNotFoundError as exc:  # pragma: no cover - exercised via main unit tests
    if exc.name != "PySide6":
        raise

    def _raise_create_qapplication(_: Sequence[str] | None = None) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    def _raise_launch_notes_client(
        _: NotesWorkspace,
        __: NotesClientSettings | None = None,
    ) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    create_qapplication = _raise_create_qapplication
    launch_notes_client = _raise_launch_notes_client


__all__ = ["create_qapplication", "launch_notes_client", "GuiDependencyError"]
