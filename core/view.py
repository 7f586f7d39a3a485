"""Derive render instructions from the note collection and dialog session.

Updates:
  v0.1.1 - 2026-10-18 - Format timestamps as short US date/time strings.
  v0.1.0 - 2026-10-14 - Introduce reconcile() with card and dialog view models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from models.dialog_session import Closed, Creating, Editing

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from models.dialog_session import DialogSession
    from models.note import Note


def format_timestamp(value: datetime) -> str:
    """Return *value* in local time as e.g. ``1/2/24, 3:04 PM``."""
    local = value.astimezone()
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local:%y}, {hour}:{local:%M} {meridiem}"


def timestamp_label(note: Note) -> str:
    if note.was_updated:
        return f"Updated: {format_timestamp(note.updated_at)}"
    return f"Created: {format_timestamp(note.created_at)}"


@dataclass(frozen=True, slots=True)
class NoteCard:
    """Render data for a single note card."""
    key: str
    title: str
    body: str
    footer: str


@dataclass(frozen=True, slots=True)
class DialogView:
    """Render data for the open note dialog."""
    heading: str
    title: str
    body: str
    editing_id: str | None = None


@dataclass(frozen=True, slots=True)
class NotesView:
    cards: tuple[NoteCard, ...]
    dialog: DialogView | None = None

    @property
    def is_empty(self) -> bool:
        return not self.cards


def _dialog_view(session: DialogSession) -> DialogView | None:
    if isinstance(session, Closed):
        return None
    if isinstance(session, Creating):
        return DialogView(heading="Add Note", title="", body="")
    if isinstance(session, Editing):
        return DialogView(
            heading="Edit Note",
            title=session.note.title,
            body=session.note.body,
            editing_id=session.note.id,
        )
    raise TypeError(f"Unsupported dialog session: {session!r}")


def reconcile(notes: Sequence[Note], session: DialogSession) -> NotesView:
    """Return the cards and optional dialog that should be displayed."""
    cards = tuple(
        NoteCard(key=note.id, title=note.title, body=note.body, footer=timestamp_label(note))
        for note in notes
    )
    return NotesView(cards=cards, dialog=_dialog_view(session))


__all__ = ["DialogView", "NoteCard", "NotesView", "format_timestamp", "reconcile"]
