"""CLI command handlers for the notes client.

Each handler drives the same workspace intents the GUI uses, without a window.

Updates:
  v0.1.0 - 2026-10-18 - Add list/add/edit/delete commands.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from core import NoteCollectionError, NotesWorkspace
from models.note import NoteDraft

from .utils import format_note_lines, print_and_log

CommandHandler = Callable[[NotesWorkspace, argparse.Namespace, logging.Logger], int]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def _run(operation: Callable[[], Awaitable[int]], logger: logging.Logger) -> int:
    try:
        return asyncio.run(operation())
    except NoteCollectionError as exc:
        logger.error("%s", exc.message)
        return 1


def run_list(workspace: NotesWorkspace, _: argparse.Namespace, logger: logging.Logger) -> int:
    """Print every note in display order."""

    async def _list() -> int:
        notes = await workspace.mount()
        for line in format_note_lines(notes):
            print(line)
        return 0

    return _run(_list, logger)


def run_add(workspace: NotesWorkspace, args: argparse.Namespace, logger: logging.Logger) -> int:
    """Create a note from the command-line title and body."""
    title = str(args.title).strip()
    if not title:
        logger.error("A note title is required.")
        return 1

    async def _add() -> int:
        workspace.request_create()
        note = await workspace.submit_dialog(NoteDraft(title=title, body=args.body or ""))
        print_and_log(logger, logging.INFO, f"Created note {note.id}.")
        return 0

    return _run(_add, logger)


def run_edit(workspace: NotesWorkspace, args: argparse.Namespace, logger: logging.Logger) -> int:
    """Update a note, keeping fields that were not supplied."""
    if args.title is None and args.body is None:
        logger.error("Nothing to update; pass --title and/or --body.")
        return 1

    async def _edit() -> int:
        await workspace.mount()
        if not workspace.request_edit(args.note_id):
            logger.error("Note %s was not found.", args.note_id)
            return 1
        current = workspace.dialog.initial_draft()
        draft = NoteDraft(
            title=current.title if args.title is None else args.title,
            body=current.body if args.body is None else args.body,
        )
        note = await workspace.submit_dialog(draft)
        print_and_log(logger, logging.INFO, f"Updated note {note.id}.")
        return 0

    return _run(_edit, logger)


def run_delete(workspace: NotesWorkspace, args: argparse.Namespace, logger: logging.Logger) -> int:
    """Delete a note and report how many remain."""

    async def _delete() -> int:
        remaining = await workspace.request_delete(args.note_id)
        print_and_log(
            logger,
            logging.INFO,
            f"Deleted note {args.note_id}; {len(remaining)} notes remain.",
        )
        return 0

    return _run(_delete, logger)


COMMAND_SPECS: dict[str | None, CommandSpec] = {
    "list": CommandSpec(run_list),
    "add": CommandSpec(run_add),
    "edit": CommandSpec(run_edit),
    "delete": CommandSpec(run_delete),
}


__all__ = ["CommandSpec", "COMMAND_SPECS"]
