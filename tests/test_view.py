"""View reconciler tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from conftest import make_note
from core.view import format_timestamp, reconcile
from models.dialog_session import CLOSED, Creating, Editing


def test_cards_follow_collection_order() -> None:
    notes = [make_note("b", title="Second"), make_note("a", title="First")]

    view = reconcile(notes, CLOSED)

    assert [card.key for card in view.cards] == ["b", "a"]
    assert view.cards[0].title == "Second"
    assert view.dialog is None
    assert not view.is_empty


def test_footer_switches_to_updated_label() -> None:
    fresh = make_note("a")
    edited = make_note("b", minutes=30)

    view = reconcile([fresh, edited], CLOSED)

    assert view.cards[0].footer.startswith("Created: ")
    assert view.cards[1].footer.startswith("Updated: ")


def test_dialog_only_when_session_open() -> None:
    note = make_note("a", title="Hello", body="World")

    creating = reconcile([note], Creating()).dialog
    editing = reconcile([note], Editing(note)).dialog

    assert creating is not None and creating.heading == "Add Note"
    assert (creating.title, creating.body, creating.editing_id) == ("", "", None)
    assert editing is not None and editing.heading == "Edit Note"
    assert (editing.title, editing.body, editing.editing_id) == ("Hello", "World", "a")


def test_empty_collection_view() -> None:
    assert reconcile([], CLOSED).is_empty


def test_format_timestamp_uses_short_us_style() -> None:
    # Naive values are treated as local time.
    value = datetime(2024, 1, 2, 15, 4)

    assert format_timestamp(value) == "1/2/24, 3:04 PM"
    assert format_timestamp(value - timedelta(hours=15)) == "1/2/24, 12:04 AM"


def test_format_timestamp_converts_to_local_time() -> None:
    value = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    local = value.astimezone()
    expected_hour = local.hour % 12 or 12

    assert f"{expected_hour}:00" in format_timestamp(value)
