"""Common exception classes for the notes client core package.

All exceptions ultimately inherit from :class:`NotesClientError`, allowing
callers to catch a single base class for any client failure while still
distinguishing individual error categories when needed.

Two families exist:

* :class:`NoteServiceError` describes what went wrong talking to the remote
  notes service (unreachable, rejected, missing note, bad credentials).
* :class:`NoteCollectionError` is what the collection store raises once a
  load or mutation failed. It always carries a human-readable message and is
  chained to the underlying service error.

Updates:
  v0.3.0 - 2026-10-19 - Add dialog session misuse error.
  v0.2.0 - 2026-10-15 - Collapse service failures into collection load/mutation errors.
  v0.1.0 - 2026-10-12 - Created module with the remote service error hierarchy.
"""

from __future__ import annotations


class NotesClientError(Exception):
    """Base exception for notes client failures."""


# ---------------------------------------------------------------------------
# Remote note service errors
# ---------------------------------------------------------------------------


class NoteServiceError(NotesClientError):
    """Base class for failures reported while calling the notes service."""


class TransportError(NoteServiceError):
    """Raised when the notes service cannot be reached."""


class ServiceError(NoteServiceError):
    """Raised when the notes service is reachable but rejects the request."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServiceUnavailable(ServiceError):
    """Raised when the notes service reports it cannot serve requests."""


class Unauthorized(ServiceError):
    """Raised when the notes service refuses the supplied credentials."""


class NoteNotFoundError(ServiceError):
    """Raised when the requested note no longer exists on the service."""


# ---------------------------------------------------------------------------
# Collection store errors
# ---------------------------------------------------------------------------


class NoteCollectionError(NotesClientError):
    """Base class for failed collection loads and mutations."""

    action = "sync notes"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LoadError(NoteCollectionError):
    """Raised when the note collection cannot be fetched."""

    action = "load notes"


class CreateError(NoteCollectionError):
    """Raised when a new note cannot be created."""

    action = "create note"


class UpdateError(NoteCollectionError):
    """Raised when an existing note cannot be updated."""

    action = "update note"


class DeleteError(NoteCollectionError):
    """Raised when a note cannot be deleted."""

    action = "delete note"


class DialogSessionError(NotesClientError):
    """Raised when the note dialog is used outside an open session."""
