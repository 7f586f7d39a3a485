"""Note data model tests.

Updates: v0.1.0 - 2026-10-13 - Cover wire parsing, timestamps and drafts.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from models.dialog_session import CLOSED, Creating, Editing
from models.note import Note, NoteDraft


def _record(**overrides: object) -> dict[str, object]:
    record: dict[str, object] = {
        "_id": "650f1c",
        "title": "Groceries",
        "text": "Milk, eggs",
        "createdAt": "2026-10-01T08:30:00.000Z",
        "updatedAt": "2026-10-01T08:30:00.000Z",
    }
    record.update(overrides)
    return record


def test_from_record_parses_service_payload() -> None:
    note = Note.from_record(_record())

    assert note.id == "650f1c"
    assert note.title == "Groceries"
    assert note.body == "Milk, eggs"
    assert note.created_at == datetime(2026, 10, 1, 8, 30, tzinfo=UTC)
    assert note.was_updated is False


def test_from_record_defaults_missing_text_and_update_time() -> None:
    note = Note.from_record(_record(text=None, updatedAt=None))

    assert note.body == ""
    assert note.updated_at == note.created_at


def test_from_record_detects_updates() -> None:
    note = Note.from_record(_record(updatedAt="2026-10-02T09:00:00Z"))

    assert note.was_updated is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"_id": ""},
        {"createdAt": None},
        {"createdAt": "yesterday"},
        {"updatedAt": "2026-09-30T00:00:00Z"},
    ],
)
def test_from_record_rejects_invalid_payloads(overrides: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        Note.from_record(_record(**overrides))


def test_to_record_uses_wire_names() -> None:
    note = Note.from_record(_record())

    record = note.to_record()

    assert record["_id"] == "650f1c"
    assert record["text"] == "Milk, eggs"
    assert record["createdAt"] == "2026-10-01T08:30:00Z"


def test_draft_payload_and_note_draft() -> None:
    note = Note.from_record(_record())

    assert NoteDraft(title="A", body="x").to_payload() == {"title": "A", "text": "x"}
    assert note.to_draft() == NoteDraft(title="Groceries", body="Milk, eggs")


def test_dialog_session_variants_report_open_state() -> None:
    note = Note.from_record(_record())

    assert CLOSED.is_open is False
    assert Creating().initial_draft() == NoteDraft()
    editing = Editing(note)
    assert editing.is_open is True
    assert editing.initial_draft().title == "Groceries"
