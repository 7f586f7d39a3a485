"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.3.0 - 2026-10-19 - Let tests hold service responses to interleave operations.
  v0.2.0 - 2026-10-18 - Add in-memory notes service fixture.
  v0.1.0 - 2026-10-14 - Force Qt offscreen platform for headless test runs.
"""

from __future__ import annotations

import asyncio
import itertools
import os
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from core.exceptions import NoteNotFoundError, NoteServiceError
from core.notifications import NotificationCenter
from models.note import Note, NoteDraft

_EPOCH = datetime(2026, 1, 2, 15, 4, tzinfo=UTC)


def pytest_configure(config: Any) -> None:
    """Ensure Qt uses the offscreen platform during tests to avoid GUI aborts."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeNoteService:
    """In-memory notes service with per-call failure injection."""

    def __init__(self, notes: list[Note] | None = None) -> None:
        self.notes: list[Note] = list(notes or [])
        self.calls: list[str] = []
        self.failures: dict[str, NoteServiceError] = {}
        self._ids = itertools.count(1)
        self._ticks = itertools.count(1)
        self._holds: dict[str, list[asyncio.Event]] = {}

    def fail(self, operation: str, error: NoteServiceError) -> None:
        """Make the next *operation* call raise *error*."""
        self.failures[operation] = error

    def hold(self, operation: str) -> asyncio.Event:
        """Make the next *operation* call wait for the returned event before answering.

        The server-side effect (snapshot or mutation) happens before the wait, so
        the response reaches the client after anything issued meanwhile.
        """
        gate = asyncio.Event()
        self._holds.setdefault(operation, []).append(gate)
        return gate

    async def _respond(self, operation: str) -> None:
        pending = self._holds.get(operation)
        if pending:
            await pending.pop(0).wait()

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        error = self.failures.pop(operation, None)
        if error is not None:
            raise error

    def _now(self) -> datetime:
        return _EPOCH + timedelta(minutes=next(self._ticks))

    def _position(self, note_id: str) -> int:
        for position, note in enumerate(self.notes):
            if note.id == note_id:
                return position
        raise NoteNotFoundError(f"Note {note_id} not found", status_code=404)

    async def list_notes(self) -> list[Note]:
        self._check("list")
        snapshot = list(self.notes)
        await self._respond("list")
        return snapshot

    async def create_note(self, draft: NoteDraft) -> Note:
        self._check("create")
        timestamp = self._now()
        note = Note(
            id=f"n{next(self._ids)}",
            title=draft.title,
            body=draft.body,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.notes.append(note)
        await self._respond("create")
        return note

    async def update_note(self, note_id: str, draft: NoteDraft) -> Note:
        self._check("update")
        position = self._position(note_id)
        current = self.notes[position]
        note = Note(
            id=current.id,
            title=draft.title,
            body=draft.body,
            created_at=current.created_at,
            updated_at=self._now(),
        )
        self.notes[position] = note
        await self._respond("update")
        return note

    async def delete_note(self, note_id: str) -> None:
        self._check("delete")
        del self.notes[self._position(note_id)]
        await self._respond("delete")


def make_note(note_id: str, title: str = "Title", body: str = "Body", *, minutes: int = 0) -> Note:
    """Return a note created at a fixed instant and updated *minutes* later."""
    return Note(
        id=note_id,
        title=title,
        body=body,
        created_at=_EPOCH,
        updated_at=_EPOCH + timedelta(minutes=minutes),
    )


@pytest.fixture()
def service() -> FakeNoteService:
    return FakeNoteService()


@pytest.fixture()
def center() -> NotificationCenter:
    return NotificationCenter()
