"""Authoritative client-side note collection.

The store is the single owner of the notes that get rendered. It only changes
its sequence after the matching service call has fully succeeded:

* ``load`` replaces the sequence with the service listing.
* ``create`` appends the server-issued note, or replaces a listed copy.
* ``update`` swaps the matching note in place, keeping its position.
* ``delete`` removes the note and then reloads the listing from the service.

Operations are not serialised. A listing that was requested before a local
write committed gets that write replayed onto it, and a listing overtaken by a
newer load is discarded.

Updates:
  v0.4.0 - 2026-10-19 - Reconcile listings with writes that commit while a load is in flight.
  v0.3.0 - 2026-10-18 - Publish every round trip on the notification centre.
  v0.2.0 - 2026-10-15 - Reload from the service after deletes.
  v0.1.0 - 2026-10-13 - Introduce NoteCollectionStore with load/create/update/delete.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .exceptions import (
    CreateError,
    DeleteError,
    LoadError,
    NoteCollectionError,
    NoteServiceError,
    UpdateError,
)
from .notifications import NotificationCenter, notification_center

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from models.note import Note, NoteDraft

    from .notes_api import NoteService

logger = logging.getLogger("notes_client.collection")


class CollectionSubscription:
    """Disposable handle for a collection change listener."""

    def __init__(self, store: NoteCollectionStore, callback: Callable[[tuple[Note, ...]], None]):
        self._store = store
        self._callback = callback
        self._closed = False

    def close(self) -> None:
        """Stop delivering change events to the callback."""
        if self._closed:
            return
        self._closed = True
        self._store.unsubscribe(self._callback)

    def __enter__(self) -> CollectionSubscription:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class NoteCollectionStore:
    """Own the ordered note collection and apply service results to it."""

    def __init__(
        self,
        service: NoteService,
        *,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self._service = service
        self._notifications = notifications or notification_center
        self._notes: tuple[Note, ...] = ()
        self._listeners: list[Callable[[tuple[Note, ...]], None]] = []
        self._lock = threading.RLock()
        self._generation = 0
        self._load_sequence = 0
        self._committed_load = 0
        self._loads_in_flight = 0
        self._journal: list[tuple[int, str, Note]] = []

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def notes(self) -> tuple[Note, ...]:
        """Return the current collection in display order."""
        return self._notes

    def get(self, note_id: str) -> Note | None:
        """Return the note identified by *note_id* when present."""
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def index_of(self, note_id: str) -> int | None:
        """Return the display position of *note_id*, or ``None`` when absent."""
        for position, note in enumerate(self._notes):
            if note.id == note_id:
                return position
        return None

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return isinstance(note_id, str) and self.get(note_id) is not None

    # ------------------------------------------------------------------
    # Change listeners
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[[tuple[Note, ...]], None]) -> CollectionSubscription:
        """Register *callback* to receive the collection after every commit."""
        with self._lock:
            self._listeners.append(callback)
        return CollectionSubscription(self, callback)

    def unsubscribe(self, callback: Callable[[tuple[Note, ...]], None]) -> None:
        """Stop delivering commits to *callback*; unknown callbacks are ignored."""
        with self._lock:
            try:
                self._listeners.remove(callback)
            except ValueError:
                pass

    def _commit(self, notes: Sequence[Note]) -> None:
        """Replace the stored collection and notify listeners."""
        with self._lock:
            self._notes = tuple(notes)
            snapshot = self._notes
            listeners = list(self._listeners)
        for callback in listeners:
            try:
                callback(snapshot)
            except Exception:  # pragma: no cover - a broken listener must not undo a commit
                logger.exception("Collection listener raised an exception")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def _failure(
        self,
        error_type: type[NoteCollectionError],
        exc: NoteServiceError,
    ) -> NoteCollectionError:
        message = f"Unable to {error_type.action}: {exc}"
        logger.error(message)
        return error_type(message)

    def _record(self, kind: str, note: Note) -> None:
        """Bump the write generation and journal the write for in-flight loads."""
        with self._lock:
            self._generation += 1
            if self._loads_in_flight:
                self._journal.append((self._generation, kind, note))

    def _begin_load(self) -> tuple[int, int]:
        with self._lock:
            self._load_sequence += 1
            self._loads_in_flight += 1
            return self._load_sequence, self._generation

    def _finish_load(self, sequence: int, generation: int, listing: list[Note] | None) -> bool:
        """Commit *listing* reconciled with later writes; return ``False`` when superseded."""
        with self._lock:
            self._loads_in_flight -= 1
            replay = [(kind, note) for gen, kind, note in self._journal if gen > generation]
            if not self._loads_in_flight:
                self._journal.clear()
            if listing is None:
                return False
            if sequence < self._committed_load:
                logger.debug(
                    "Discarding listing %d overtaken by listing %d",
                    sequence,
                    self._committed_load,
                )
                return False
            self._committed_load = sequence
            notes = list(listing)
            for kind, note in replay:
                position = next((i for i, item in enumerate(notes) if item.id == note.id), None)
                if kind == "delete":
                    if position is not None:
                        del notes[position]
                elif position is not None:
                    notes[position] = note
                elif kind == "create":
                    notes.append(note)
            self._commit(notes)
            return True

    async def load(self) -> tuple[Note, ...]:
        """Replace the collection with the service listing.

        Writes that commit while the request is in flight are replayed onto the
        listing; a listing that arrives after a newer one is ignored.

        Raises:
          LoadError: When the service call fails. The previous collection is kept.
        """
        sequence, generation = self._begin_load()
        listing: list[Note] | None = None
        try:
            with self._notifications.track_operation(
                LoadError.action,
                start_message="Loading notes…",
                success_message="Notes loaded.",
            ):
                listing = await self._service.list_notes()
        except NoteServiceError as exc:
            raise self._failure(LoadError, exc) from exc
        finally:
            committed = self._finish_load(sequence, generation, listing)
        if committed:
            logger.info("Loaded %d notes", len(self._notes))
        return self._notes

    async def create(self, draft: NoteDraft) -> Note:
        """Create a note from *draft* and append it to the collection.

        A listing that already carries the new note keeps its single entry.

        Raises:
          CreateError: When the service call fails. The collection is unchanged.
        """
        try:
            with self._notifications.track_operation(
                CreateError.action,
                start_message="Creating note…",
                success_message="Note created.",
            ):
                note = await self._service.create_note(draft)
        except NoteServiceError as exc:
            raise self._failure(CreateError, exc) from exc
        with self._lock:
            position = self.index_of(note.id)
            notes = list(self._notes)
            if position is None:
                notes.append(note)
            else:
                notes[position] = note
            self._record("create", note)
            self._commit(notes)
        logger.info("Created note %s", note.id)
        return note

    async def update(self, note_id: str, draft: NoteDraft) -> Note:
        """Update *note_id* and replace it in place.

        Raises:
          UpdateError: When the service call fails. The collection is unchanged.
        """
        try:
            with self._notifications.track_operation(
                UpdateError.action,
                start_message="Saving note…",
                success_message="Note updated.",
                metadata={"note_id": note_id},
            ):
                note = await self._service.update_note(note_id, draft)
        except NoteServiceError as exc:
            raise self._failure(UpdateError, exc) from exc
        with self._lock:
            self._record("update", note)
            position = self.index_of(note_id)
            if position is None:
                # Removed by a reload while the request was in flight.
                logger.warning("Updated note %s is no longer in the collection", note_id)
                return note
            notes = list(self._notes)
            notes[position] = note
            self._commit(notes)
        logger.info("Updated note %s", note_id)
        return note

    async def delete(self, note_id: str) -> tuple[Note, ...]:
        """Delete *note_id* and refresh the collection from the service.

        Raises:
          DeleteError: When the delete call fails. The collection is unchanged.
          LoadError: When the delete succeeded but the follow-up reload failed.
            The deleted note is dropped locally before the error is raised.
        """
        try:
            with self._notifications.track_operation(
                DeleteError.action,
                start_message="Deleting note…",
                success_message="Note deleted.",
                metadata={"note_id": note_id},
            ):
                await self._service.delete_note(note_id)
        except NoteServiceError as exc:
            raise self._failure(DeleteError, exc) from exc
        logger.info("Deleted note %s", note_id)
        removed = self.get(note_id)
        if removed is not None:
            self._record("delete", removed)
        try:
            return await self.load()
        except LoadError:
            self._commit([note for note in self._notes if note.id != note_id])
            raise


__all__ = ["CollectionSubscription", "NoteCollectionStore"]
