"""Tests for the HTTPX notes service client.

Updates: v0.1.0 - 2026-10-16 - Cover CRUD requests and status code mapping.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from core.exceptions import (
    NoteNotFoundError,
    ServiceError,
    ServiceUnavailable,
    TransportError,
    Unauthorized,
)
from core.notes_api import HttpNoteService, NoteService
from models.note import NoteDraft

_BASE_URL = "http://notes.test"
_NOTE = {
    "_id": "abc123",
    "title": "A",
    "text": "x",
    "createdAt": "2026-10-01T08:30:00Z",
    "updatedAt": "2026-10-01T08:30:00Z",
}


def _build_service(
    handler: Callable[[httpx.Request], httpx.Response],
    **kwargs: object,
) -> tuple[HttpNoteService, httpx.AsyncClient]:
    """Return a service whose requests are answered by *handler*."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=_BASE_URL)
    service = HttpNoteService(base_url=_BASE_URL, client_factory=lambda: client, **kwargs)
    return service, client


def test_service_satisfies_protocol() -> None:
    assert isinstance(HttpNoteService(), NoteService)


def test_base_url_is_required() -> None:
    with pytest.raises(ValueError):
        HttpNoteService(base_url="  ")


@pytest.mark.asyncio()
async def test_list_notes_preserves_service_order() -> None:
    second = dict(_NOTE, _id="def456", title="B")
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[_NOTE, second])

    service, client = _build_service(handler)
    notes = await service.list_notes()
    await client.aclose()

    assert [note.id for note in notes] == ["abc123", "def456"]
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/api/notes"


@pytest.mark.asyncio()
async def test_create_note_posts_draft() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json=_NOTE)

    service, client = _build_service(handler)
    note = await service.create_note(NoteDraft(title="A", body="x"))
    await client.aclose()

    assert captured == {"method": "POST", "body": {"title": "A", "text": "x"}}
    assert note.id == "abc123"


@pytest.mark.asyncio()
async def test_update_and_delete_target_note_url() -> None:
    seen: list[tuple[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json=dict(_NOTE, title="B"))

    service, client = _build_service(handler)
    updated = await service.update_note("abc123", NoteDraft(title="B"))
    await service.delete_note("abc123")
    await client.aclose()

    assert updated.title == "B"
    assert seen == [("PATCH", "/api/notes/abc123"), ("DELETE", "/api/notes/abc123")]


@pytest.mark.asyncio()
async def test_bearer_token_header_is_sent() -> None:
    headers: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        headers.append(request.headers.get("Authorization"))
        return httpx.Response(200, json=[])

    service, client = _build_service(handler, api_token="secret-token")
    await service.list_notes()
    await client.aclose()

    assert headers == ["Bearer secret-token"]


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    ("status", "error_type"),
    [
        (401, Unauthorized),
        (403, Unauthorized),
        (404, NoteNotFoundError),
        (503, ServiceUnavailable),
        (400, ServiceError),
        (500, ServiceError),
    ],
)
async def test_status_codes_map_to_service_errors(
    status: int,
    error_type: type[ServiceError],
) -> None:
    service, client = _build_service(
        lambda _: httpx.Response(status, json={"error": "Note title is required"})
    )

    with pytest.raises(error_type) as excinfo:
        await service.create_note(NoteDraft())
    await client.aclose()

    assert excinfo.value.status_code == status
    assert str(excinfo.value) == "Note title is required"


@pytest.mark.asyncio()
async def test_error_without_body_uses_status_line() -> None:
    service, client = _build_service(lambda _: httpx.Response(500, text="oops"))

    with pytest.raises(ServiceError, match="status 500"):
        await service.list_notes()
    await client.aclose()


@pytest.mark.asyncio()
async def test_connection_failure_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    service, client = _build_service(handler)

    with pytest.raises(TransportError):
        await service.list_notes()
    await client.aclose()


@pytest.mark.asyncio()
async def test_malformed_payloads_raise_service_error() -> None:
    service, client = _build_service(lambda _: httpx.Response(200, json={"notes": []}))

    with pytest.raises(ServiceError, match="malformed note listing"):
        await service.list_notes()
    await client.aclose()

    service, client = _build_service(lambda _: httpx.Response(200, json={"title": "no id"}))
    with pytest.raises(ServiceError, match="malformed note"):
        await service.create_note(NoteDraft(title="A"))
    await client.aclose()
