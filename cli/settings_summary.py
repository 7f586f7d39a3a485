"""Printable summaries for notes client configuration.

Updates:
  v0.1.0 - 2026-10-18 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .utils import mask_secret

if TYPE_CHECKING:
    from config import NotesClientSettings


def settings_summary_lines(settings: NotesClientSettings) -> list[str]:
    """Return the summary lines for *settings* with secrets masked."""
    return [
        "Notes client configuration",
        "--------------------------",
        f"Service URL: {settings.api_base_url}{settings.notes_path}",
        f"Request timeout: {settings.request_timeout_seconds:g}s",
        f"API token: {mask_secret(settings.api_token)}",
        f"Window title: {settings.window_title}",
    ]


def print_settings_summary(settings: NotesClientSettings) -> None:
    """Emit a readable summary of the resolved configuration."""
    for line in settings_summary_lines(settings):
        print(line)
