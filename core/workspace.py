"""Intent facade wiring the collection store, dialog session and view together.

The presentation layer talks only to :class:`NotesWorkspace`: it reads the
current notes, session and view, and raises the user intents defined here.

Updates:
  v0.2.1 - 2026-10-19 - Capture the dialog session as soon as a save is submitted.
  v0.2.0 - 2026-10-18 - Add build_workspace factory driven by settings.
  v0.1.0 - 2026-10-14 - Introduce NotesWorkspace intents.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .collection_store import NoteCollectionStore
from .dialog_session import DialogSessionController
from .notes_api import HttpNoteService
from .view import NotesView, reconcile

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from config import NotesClientSettings
    from models.dialog_session import DialogSession
    from models.note import Note, NoteDraft

    from .notes_api import NoteService
    from .notifications import NotificationCenter

logger = logging.getLogger("notes_client.workspace")


class NotesWorkspace:
    """Expose the note collection, dialog session and user intents."""

    def __init__(
        self,
        store: NoteCollectionStore,
        dialog: DialogSessionController | None = None,
    ) -> None:
        self.store = store
        self.dialog = dialog or DialogSessionController()

    @property
    def notes(self) -> tuple[Note, ...]:
        return self.store.notes

    @property
    def session(self) -> DialogSession:
        return self.dialog.session

    def view(self) -> NotesView:
        """Return render instructions for the current state."""
        return reconcile(self.store.notes, self.dialog.session)

    async def mount(self) -> tuple[Note, ...]:
        """Perform the initial full load."""
        return await self.store.load()

    async def refresh(self) -> tuple[Note, ...]:
        """Reload the collection, e.g. when the user asks for fresh data."""
        return await self.store.load()

    def request_create(self) -> bool:
        """Open the add-note dialog unless another dialog is open."""
        return self.dialog.open_create()

    def request_edit(self, note_id: str) -> bool:
        """Open the edit dialog for *note_id* unless another dialog is open."""
        note = self.store.get(note_id)
        if note is None:
            logger.warning("Cannot edit unknown note %s", note_id)
            return False
        return self.dialog.open_edit(note)

    async def request_delete(self, note_id: str) -> tuple[Note, ...]:
        """Delete *note_id* and return the reloaded collection."""
        return await self.store.delete(note_id)

    def submit_dialog(self, draft: NoteDraft) -> Coroutine[Any, Any, Note]:
        """Return a coroutine saving the dialog open now; it closes only on success."""
        return self.dialog.submit(
            draft,
            create=self.store.create,
            update=self.store.update,
        )

    def dismiss_dialog(self) -> None:
        self.dialog.dismiss()


def build_workspace(
    settings: NotesClientSettings,
    *,
    service: NoteService | None = None,
    notifications: NotificationCenter | None = None,
) -> NotesWorkspace:
    """Return a workspace backed by the configured notes service."""
    resolved_service = service or HttpNoteService.from_settings(settings)
    logger.debug("Using notes service at %s%s", settings.api_base_url, settings.notes_path)
    store = NoteCollectionStore(resolved_service, notifications=notifications)
    return NotesWorkspace(store)


__all__ = ["NotesWorkspace", "build_workspace"]
