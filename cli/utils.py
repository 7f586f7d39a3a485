"""Shared CLI utility functions for notes client commands.

Updates:
  v0.1.0 - 2026-10-18 - Extract stdout logging, masking and note listing helpers.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from core.view import timestamp_label

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from collections.abc import Sequence
    from logging import Logger

    from models.note import Note


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def mask_secret(value: str | None) -> str:
    """Return an obfuscated representation of secret configuration values."""
    if not value:
        return "not set"
    secret = value.strip()
    if len(secret) <= 6:
        return "set (****)"
    prefix = secret[:4]
    suffix = secret[-4:]
    return f"set ({prefix}...{suffix})"


def format_note_lines(notes: Sequence[Note], *, width: int = 72) -> list[str]:
    """Return printable lines describing *notes* in display order."""
    if not notes:
        return ["No notes yet."]
    lines: list[str] = []
    for note in notes:
        lines.append(f"[{note.id}] {note.title or '(untitled)'}")
        if note.body:
            lines.extend(f"    {line}" for line in textwrap.wrap(note.body, width=width))
        lines.append(f"    {timestamp_label(note)}")
    return lines
