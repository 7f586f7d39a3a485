"""Settings management utilities for the notes client.

Updates:
  v0.2.0 - 2026-10-18 - Read optional JSON config and .env values with explicit precedence.
  v0.1.0 - 2026-10-12 - Add NotesClientSettings with service URL, path, timeout and token.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_API_BASE_URL = "http://localhost:5000"
DEFAULT_NOTES_PATH = "/api/notes"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_WINDOW_TITLE = "Notes"

_ENV_PREFIX = "NOTES_CLIENT_"
_DOTENV_FALLBACK_PATH = ".env"
_DEFAULT_CONFIG_PATH = Path("config") / "config.json"
_SECRET_KEYS = {"api_token", "API_TOKEN"}

logger = logging.getLogger("notes_client.settings")


class SettingsError(Exception):
    """Raised when notes client configuration cannot be loaded or validated."""


def _read_dotenv_values() -> dict[str, str]:
    """Load ``.env`` entries into a mapping without mutating ``os.environ``."""
    env_file_override = os.getenv(f"{_ENV_PREFIX}ENV_FILE")
    if env_file_override is not None:
        candidate = env_file_override.strip()
        if not candidate:
            return {}
        path = Path(candidate).expanduser()
    else:
        path = Path(_DOTENV_FALLBACK_PATH).expanduser()
    if not path.is_file():
        return {}
    raw_values = dotenv_values(str(path))
    return {str(key): str(value) for key, value in raw_values.items() if value is not None}


class NotesClientSettings(BaseSettings):
    """Application configuration sourced from keyword arguments, JSON and environment."""

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the remote notes service.",
    )
    notes_path: str = Field(
        default=DEFAULT_NOTES_PATH,
        description="Collection path of the notes resource on the service.",
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        description="HTTP timeout applied to every notes service request.",
    )
    api_token: str | None = Field(
        default=None,
        description="Optional bearer token sent to the notes service.",
        repr=False,
    )
    window_title: str = Field(default=DEFAULT_WINDOW_TITLE)

    model_config = cast(
        "SettingsConfigDict",
        {
            "env_prefix": _ENV_PREFIX,
            "case_sensitive": False,
            "extra": "ignore",
        },
    )

    @field_validator("api_base_url", mode="before")
    def _normalise_base_url(cls, value: object) -> str:
        text = str(value or "").strip()
        if not text:
            return DEFAULT_API_BASE_URL
        if not text.startswith(("http://", "https://")):
            raise ValueError("api_base_url must start with http:// or https://")
        return text.rstrip("/")

    @field_validator("notes_path", mode="before")
    def _normalise_notes_path(cls, value: object) -> str:
        text = str(value or "").strip().strip("/")
        if not text:
            return DEFAULT_NOTES_PATH
        return f"/{text}"

    @field_validator("request_timeout_seconds")
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout_seconds must be greater than zero")
        return value

    @field_validator("api_token", mode="before")
    def _strip_token(cls, value: object) -> str | None:
        if value is None:
            return None
        token = str(value).strip()
        return token or None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(api_base_url="...")).
            2. JSON configuration file.
            3. Environment variables, then ``.env`` entries.
            4. File secrets.
        """

        def env_with_dotenv(_: BaseSettings | None = None) -> dict[str, Any]:
            dotenv = _read_dotenv_values()
            data: dict[str, Any] = {}
            for field in cls.model_fields:
                key = f"{_ENV_PREFIX}{field.upper()}"
                value = os.getenv(key)
                if value is None:
                    value = dotenv.get(key)
                if value is None or not str(value).strip():
                    continue
                data[field] = str(value).strip()
            return data

        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            cast("PydanticBaseSettingsSource", env_with_dotenv),
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv(f"{_ENV_PREFIX}CONFIG_JSON")
            if explicit_path:
                path = Path(explicit_path).expanduser()
                if not path.exists():
                    raise SettingsError(f"Configuration file not found: {path}")
            else:
                path = _DEFAULT_CONFIG_PATH
                if not path.exists():
                    return {}
            try:
                raw_contents = path.read_text(encoding="utf-8")
            except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                raise SettingsError(f"Unable to read configuration file: {path}") from exc
            try:
                data = json.loads(raw_contents)
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
            if not isinstance(data, dict):
                raise SettingsError(f"Configuration file {path} must contain a JSON object")
            mapping_data = cast("Mapping[object, Any]", data)
            data_dict: dict[str, Any] = {str(key): value for key, value in mapping_data.items()}
            removed_secrets = sorted(key for key in _SECRET_KEYS if data_dict.pop(key, None))
            if removed_secrets:
                logger.warning(
                    "Ignoring secret key(s) %s in configuration file %s; "
                    "set credentials via environment variables instead.",
                    ", ".join(removed_secrets),
                    path,
                )
            return {key: value for key, value in data_dict.items() if key in cls.model_fields}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> NotesClientSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return NotesClientSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid notes client configuration") from exc
