"""Controller for the single add/edit note dialog session.

Updates:
  v0.3.0 - 2026-10-19 - Bind submissions to the session open when Save is pressed.
  v0.2.0 - 2026-10-17 - Route submissions through injected create/update callables.
  v0.1.0 - 2026-10-13 - Introduce DialogSessionController state machine.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from models.dialog_session import CLOSED, Closed, Creating, DialogSession, Editing

from .exceptions import DialogSessionError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

    from models.note import Note, NoteDraft

logger = logging.getLogger("notes_client.dialog")


class DialogSessionController:
    """Track which note dialog, if any, is open.

    Only one session may be open at a time. Requests to open a second session
    are rejected so unsaved input in the open dialog is never replaced.
    """

    def __init__(self) -> None:
        self._session: DialogSession = CLOSED
        self._listeners: list[Callable[[DialogSession], None]] = []
        self._lock = threading.RLock()

    @property
    def session(self) -> DialogSession:
        """Return the current session state."""
        return self._session

    @property
    def is_open(self) -> bool:
        return self._session.is_open

    def subscribe(self, callback: Callable[[DialogSession], None]) -> Callable[[], None]:
        """Register *callback* for session changes and return an unsubscribe hook."""
        self._listeners.append(callback)

        def _unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return _unsubscribe

    def _transition(self, session: DialogSession) -> None:
        self._session = session
        for callback in list(self._listeners):
            callback(session)

    def open_create(self) -> bool:
        """Open a create session; return ``False`` when another session is open."""
        with self._lock:
            if self._session.is_open:
                logger.debug("Ignoring create request while %s is open", self._session)
                return False
            self._transition(Creating())
            return True

    def open_edit(self, note: Note) -> bool:
        """Open an edit session for *note*; return ``False`` when a session is open."""
        with self._lock:
            if self._session.is_open:
                logger.debug(
                    "Ignoring edit request for %s while %s is open", note.id, self._session
                )
                return False
            self._transition(Editing(note))
            return True

    def dismiss(self) -> None:
        """Close the session without saving."""
        with self._lock:
            if isinstance(self._session, Closed):
                return
            self._transition(CLOSED)

    def initial_draft(self) -> NoteDraft:
        """Return the values the dialog form should start with."""
        session = self._session
        if isinstance(session, Closed):
            raise DialogSessionError("No note dialog is open")
        return session.initial_draft()

    def submit(
        self,
        draft: NoteDraft,
        *,
        create: Callable[[NoteDraft], Awaitable[Note]],
        update: Callable[[str, NoteDraft], Awaitable[Note]],
    ) -> Coroutine[Any, Any, Note]:
        """Return a coroutine saving *draft* for the session open right now.

        The session is captured when this is called, not when the coroutine
        runs, so a save scheduled for later never lands on a dialog opened in
        the meantime. The session closes only once the save succeeds and only
        if it is still the current one; any exception leaves it open so the
        user can retry or cancel.

        Raises:
          DialogSessionError: When no session is open.
        """
        session = self._session
        if isinstance(session, Closed):
            raise DialogSessionError("Cannot submit a note dialog that is not open")
        return self._save(session, draft, create=create, update=update)

    async def _save(
        self,
        session: Creating | Editing,
        draft: NoteDraft,
        *,
        create: Callable[[NoteDraft], Awaitable[Note]],
        update: Callable[[str, NoteDraft], Awaitable[Note]],
    ) -> Note:
        if isinstance(session, Creating):
            note = await create(draft)
        else:
            note = await update(session.note.id, draft)
        with self._lock:
            if self._session is session:
                self._transition(CLOSED)
            else:
                logger.debug("Saved %s after its dialog was dismissed", note.id)
        return note


__all__ = ["DialogSessionController"]
