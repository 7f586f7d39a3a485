"""Data models for the notes client.

Updates: v0.2.0 - 2026-10-13 - Export dialog session variants.
Updates: v0.1.0 - 2026-10-12 - Export Note and NoteDraft dataclasses.
"""

from .dialog_session import CLOSED, Closed, Creating, DialogSession, Editing
from .note import Note, NoteDraft

__all__ = [
    "CLOSED",
    "Closed",
    "Creating",
    "DialogSession",
    "Editing",
    "Note",
    "NoteDraft",
]
