"""Dialog widgets used by the notes client GUI.

Updates:
  v0.1.0 - 2026-10-14 - Export the note dialog.
"""

from __future__ import annotations

from .notes import NoteDialog

__all__ = ["NoteDialog"]
