"""Note data model definitions.

Updates:
  v0.2.0 - 2026-10-19 - Split title/body, add Draft and wire-format helpers.
  v0.1.0 - 2026-10-12 - Add Note dataclass for remote note records.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


def _parse_timestamp(value: object) -> datetime:
    """Return an aware UTC timestamp parsed from an ISO-8601 string."""
    text = str(value or "").strip()
    if not text:
        raise ValueError("timestamp is required")
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class NoteDraft:
    """User-entered title/body pair not yet persisted."""
    title: str = ""
    body: str = ""

    def to_payload(self) -> dict[str, str]:
        """Return the JSON body sent to the notes service."""
        return {"title": self.title, "text": self.body}


@dataclass(frozen=True, slots=True)
class Note:
    """Note record as issued by the remote notes service."""
    id: str
    title: str
    body: str
    created_at: datetime
    updated_at: datetime

    @property
    def was_updated(self) -> bool:
        """Return ``True`` once the note has been modified after creation."""
        return self.updated_at > self.created_at

    def to_draft(self) -> NoteDraft:
        """Return the editable title/body of this note."""
        return NoteDraft(title=self.title, body=self.body)

    def to_record(self) -> dict[str, Any]:
        """Return the wire representation used by the notes service."""
        return {
            "_id": self.id,
            "title": self.title,
            "text": self.body,
            "createdAt": _format_timestamp(self.created_at),
            "updatedAt": _format_timestamp(self.updated_at),
        }

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> Note:
        """Hydrate a Note from a service payload.

        Raises:
          ValueError: When the identifier or timestamps are missing or malformed.
        """
        note_id = str(data.get("_id") or data.get("id") or "").strip()
        if not note_id:
            raise ValueError("note record is missing an id")
        created_at = _parse_timestamp(data.get("createdAt"))
        updated_raw = data.get("updatedAt")
        updated_at = _parse_timestamp(updated_raw) if updated_raw else created_at
        if updated_at < created_at:
            raise ValueError(f"note {note_id} was updated before it was created")
        return cls(
            id=note_id,
            title=str(data.get("title") or ""),
            body=str(data.get("text") or ""),
            created_at=created_at,
            updated_at=updated_at,
        )


__all__ = ["Note", "NoteDraft"]
