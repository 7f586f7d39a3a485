"""Configuration helpers for the notes client.

Updates: v0.2.0 - 2026-10-18 - Expose service defaults alongside the settings loader.
Updates: v0.1.0 - 2026-10-12 - Package scaffold.
"""

from .settings import (
    DEFAULT_API_BASE_URL,
    DEFAULT_NOTES_PATH,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    NotesClientSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_NOTES_PATH",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "NotesClientSettings",
    "SettingsError",
    "load_settings",
]
