"""Runtime boot helpers for the notes client CLI.

Updates:
  v0.1.1 - 2026-10-18 - Add httpx logging toggle helper.
  v0.1.0 - 2026-10-12 - Extract logging configuration helpers.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG = Path("config/logging.conf")
_HTTP_LOGGERS = ("httpx", "httpcore")


def setup_logging(logging_conf_path: Path | None) -> None:
    """Configure logging using *logging_conf_path* when available."""
    path = logging_conf_path or DEFAULT_LOGGING_CONFIG
    if path.exists():
        try:
            logging.config.fileConfig(path, disable_existing_loggers=False)
            return
        except (KeyError, ValueError, OSError) as exc:  # pragma: no cover - configuration fallback
            logging.getLogger("notes_client.runtime").warning(
                "Ignoring unusable logging configuration %s: %s", path, exc
            )
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def configure_http_logging(verbose: bool) -> None:
    """Show per-request httpx logs only when *verbose* is requested."""
    level = logging.DEBUG if verbose else logging.WARNING
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(level)
