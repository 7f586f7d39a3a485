"""Dialog session states for the note editor.

A session is a tagged union: exactly one of :class:`Closed`, :class:`Creating`
or :class:`Editing` describes the dialog at any moment.

Updates: v0.1.0 - 2026-10-13 - Introduce Closed/Creating/Editing session variants.
"""
from __future__ import annotations

from dataclasses import dataclass

from .note import Note, NoteDraft


@dataclass(frozen=True, slots=True)
class Closed:
    """No dialog is open."""

    @property
    def is_open(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Creating:
    """The dialog is collecting a brand new note."""

    @property
    def is_open(self) -> bool:
        return True

    def initial_draft(self) -> NoteDraft:
        return NoteDraft()


@dataclass(frozen=True, slots=True)
class Editing:
    """The dialog edits *note*, captured when the session opened."""
    note: Note

    @property
    def is_open(self) -> bool:
        return True

    def initial_draft(self) -> NoteDraft:
        return self.note.to_draft()


DialogSession = Closed | Creating | Editing

CLOSED = Closed()


__all__ = ["CLOSED", "Closed", "Creating", "DialogSession", "Editing"]
