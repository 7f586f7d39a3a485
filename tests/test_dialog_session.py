"""Dialog session controller tests.

Updates: v0.1.0 - 2026-10-17 - Cover single-session rule and submit routing.
"""

from __future__ import annotations

import pytest

from conftest import make_note
from core.dialog_session import DialogSessionController
from core.exceptions import CreateError, DialogSessionError
from models.dialog_session import CLOSED, Creating, Editing
from models.note import Note, NoteDraft


class _Recorder:
    def __init__(self) -> None:
        self.created: list[NoteDraft] = []
        self.updated: list[tuple[str, NoteDraft]] = []

    async def create(self, draft: NoteDraft) -> Note:
        self.created.append(draft)
        return make_note("new", title=draft.title, body=draft.body)

    async def update(self, note_id: str, draft: NoteDraft) -> Note:
        self.updated.append((note_id, draft))
        return make_note(note_id, title=draft.title, body=draft.body, minutes=5)


def test_starts_closed() -> None:
    controller = DialogSessionController()

    assert controller.session == CLOSED
    assert controller.is_open is False


def test_open_create_rejects_second_session() -> None:
    controller = DialogSessionController()

    assert controller.open_create() is True
    assert controller.open_create() is False
    assert controller.open_edit(make_note("a")) is False
    assert isinstance(controller.session, Creating)


def test_open_edit_while_editing_is_noop() -> None:
    controller = DialogSessionController()
    first = make_note("a")

    assert controller.open_edit(first) is True
    assert controller.open_edit(make_note("b")) is False

    session = controller.session
    assert isinstance(session, Editing)
    assert session.note is first


def test_dismiss_returns_to_closed_and_notifies() -> None:
    controller = DialogSessionController()
    seen: list[object] = []
    unsubscribe = controller.subscribe(seen.append)

    controller.open_create()
    controller.dismiss()
    controller.dismiss()
    unsubscribe()
    controller.open_create()

    assert [type(state).__name__ for state in seen] == ["Creating", "Closed"]


def test_initial_draft_requires_open_session() -> None:
    controller = DialogSessionController()

    with pytest.raises(DialogSessionError):
        controller.initial_draft()

    controller.open_edit(make_note("a", title="Hello", body="World"))
    assert controller.initial_draft() == NoteDraft(title="Hello", body="World")


@pytest.mark.asyncio()
async def test_submit_create_routes_to_create_and_closes() -> None:
    controller = DialogSessionController()
    recorder = _Recorder()
    controller.open_create()

    note = await controller.submit(
        NoteDraft(title="A", body="x"),
        create=recorder.create,
        update=recorder.update,
    )

    assert note.title == "A"
    assert recorder.created == [NoteDraft(title="A", body="x")]
    assert recorder.updated == []
    assert controller.session == CLOSED


@pytest.mark.asyncio()
async def test_submit_edit_routes_to_update_with_snapshot_id() -> None:
    controller = DialogSessionController()
    recorder = _Recorder()
    controller.open_edit(make_note("a"))

    await controller.submit(NoteDraft(title="B"), create=recorder.create, update=recorder.update)

    assert recorder.updated == [("a", NoteDraft(title="B"))]
    assert controller.session == CLOSED


@pytest.mark.asyncio()
async def test_failed_submit_keeps_session_open() -> None:
    controller = DialogSessionController()
    controller.open_create()

    async def failing_create(_: NoteDraft) -> Note:
        raise CreateError("Unable to create note: offline")

    with pytest.raises(CreateError):
        await controller.submit(
            NoteDraft(title="A"),
            create=failing_create,
            update=_Recorder().update,
        )

    assert isinstance(controller.session, Creating)


@pytest.mark.asyncio()
async def test_submit_without_session_raises() -> None:
    controller = DialogSessionController()
    recorder = _Recorder()

    with pytest.raises(DialogSessionError):
        await controller.submit(NoteDraft(title="A"), create=recorder.create, update=recorder.update)
