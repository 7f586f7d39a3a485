"""Remote note service protocol and HTTPX-backed client.

Updates:
  v0.2.0 - 2026-10-16 - Map HTTP status codes onto the service error hierarchy.
  v0.1.0 - 2026-10-12 - Introduce NoteService protocol and HttpNoteService.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from models.note import Note, NoteDraft

from .exceptions import (
    NoteNotFoundError,
    ServiceError,
    ServiceUnavailable,
    TransportError,
    Unauthorized,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from config import NotesClientSettings

logger = logging.getLogger("notes_client.api")

_UNAVAILABLE_STATUS_CODES = {502, 503, 504}
_UNAUTHORIZED_STATUS_CODES = {401, 403}


@runtime_checkable
class NoteService(Protocol):
    """CRUD contract offered by the remote notes backend."""

    async def list_notes(self) -> list[Note]:
        """Return every note in the order the service keeps them."""
        ...

    async def create_note(self, draft: NoteDraft) -> Note:
        """Persist *draft* and return the server-issued note."""
        ...

    async def update_note(self, note_id: str, draft: NoteDraft) -> Note:
        """Replace the title/body of *note_id* and return the refreshed note."""
        ...

    async def delete_note(self, note_id: str) -> None:
        """Remove *note_id* from the service."""
        ...


def _error_message(response: httpx.Response) -> str:
    """Return the service-provided error text, falling back to the status line."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        message = str(payload.get("error") or payload.get("message") or "").strip()
        if message:
            return message
    reason = response.reason_phrase or "error"
    return f"Request failed with status {response.status_code}: {reason}"


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    status = response.status_code
    message = _error_message(response)
    if status in _UNAUTHORIZED_STATUS_CODES:
        raise Unauthorized(message, status_code=status)
    if status == 404:
        raise NoteNotFoundError(message, status_code=status)
    if status in _UNAVAILABLE_STATUS_CODES:
        raise ServiceUnavailable(message, status_code=status)
    raise ServiceError(message, status_code=status)


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ServiceError("Notes service returned invalid JSON") from exc


def _parse_note(payload: object) -> Note:
    if not isinstance(payload, dict):
        raise ServiceError("Notes service returned a malformed note")
    try:
        return Note.from_record(payload)
    except ValueError as exc:
        raise ServiceError(f"Notes service returned a malformed note: {exc}") from exc


@dataclass(slots=True)
class HttpNoteService:
    """HTTPX-backed client for the notes REST API."""

    base_url: str = "http://localhost:5000"
    notes_path: str = "/api/notes"
    timeout: float = 10.0
    api_token: str | None = None
    client_factory: Callable[[], httpx.AsyncClient] | None = None

    def __post_init__(self) -> None:
        """Normalise the base URL and collection path."""
        if not self.base_url or not self.base_url.strip():
            raise ValueError("Notes service base URL is required")
        self.base_url = self.base_url.strip().rstrip("/")
        self.notes_path = "/" + self.notes_path.strip().strip("/")

    @classmethod
    def from_settings(cls, settings: NotesClientSettings) -> HttpNoteService:
        """Build a client from resolved application settings."""
        return cls(
            base_url=settings.api_base_url,
            notes_path=settings.notes_path,
            timeout=settings.request_timeout_seconds,
            api_token=settings.api_token,
        )

    def _note_url(self, note_id: str) -> str:
        return f"{self.notes_path}/{quote(note_id, safe='')}"

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        manage_client = self.client_factory is None
        if self.client_factory is None:
            client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
            )
        else:
            client = self.client_factory()
        try:
            response = await client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Notes service request %s %s failed: %s", method, url, exc)
            raise TransportError(f"Notes service is unreachable: {exc}") from exc
        finally:
            if manage_client:
                await client.aclose()
        logger.debug("Notes service %s %s -> %s", method, url, response.status_code)
        _raise_for_status(response)
        return response

    async def list_notes(self) -> list[Note]:
        """Fetch the full note collection."""
        response = await self._request("GET", self.notes_path)
        payload = _parse_json(response)
        if not isinstance(payload, list):
            raise ServiceError("Notes service returned a malformed note listing")
        return [_parse_note(entry) for entry in payload]

    async def create_note(self, draft: NoteDraft) -> Note:
        """Create a note from *draft*."""
        response = await self._request("POST", self.notes_path, json=draft.to_payload())
        return _parse_note(_parse_json(response))

    async def update_note(self, note_id: str, draft: NoteDraft) -> Note:
        """Update *note_id* with the contents of *draft*."""
        response = await self._request(
            "PATCH",
            self._note_url(note_id),
            json=draft.to_payload(),
        )
        return _parse_note(_parse_json(response))

    async def delete_note(self, note_id: str) -> None:
        """Delete *note_id*."""
        await self._request("DELETE", self._note_url(note_id))


__all__ = ["HttpNoteService", "NoteService"]
