"""Core service layer for the notes client.

Updates:
  v0.3.0 - 2026-10-18 - Export workspace factory and view reconciler.
  v0.2.0 - 2026-10-15 - Export collection store and dialog session controller.
  v0.1.0 - 2026-10-12 - Surface the notes service client and exception hierarchy.
"""

from models.note import Note, NoteDraft

from .collection_store import CollectionSubscription, NoteCollectionStore
from .dialog_session import DialogSessionController
from .exceptions import (
    CreateError,
    DeleteError,
    DialogSessionError,
    LoadError,
    NoteCollectionError,
    NoteNotFoundError,
    NotesClientError,
    NoteServiceError,
    ServiceError,
    ServiceUnavailable,
    TransportError,
    Unauthorized,
    UpdateError,
)
from .notes_api import HttpNoteService, NoteService
from .notifications import (
    Notification,
    NotificationCenter,
    NotificationLevel,
    NotificationStatus,
    NotificationSubscription,
    notification_center,
)
from .view import DialogView, NoteCard, NotesView, format_timestamp, reconcile
from .workspace import NotesWorkspace, build_workspace

__all__ = [
    "CollectionSubscription",
    "CreateError",
    "DeleteError",
    "DialogSessionController",
    "DialogSessionError",
    "DialogView",
    "HttpNoteService",
    "LoadError",
    "Note",
    "NoteCard",
    "NoteCollectionError",
    "NoteCollectionStore",
    "NoteDraft",
    "NoteNotFoundError",
    "NoteService",
    "NoteServiceError",
    "NotesClientError",
    "NotesView",
    "NotesWorkspace",
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "NotificationStatus",
    "NotificationSubscription",
    "ServiceError",
    "ServiceUnavailable",
    "TransportError",
    "Unauthorized",
    "UpdateError",
    "build_workspace",
    "format_timestamp",
    "notification_center",
    "reconcile",
]
