"""Argument parser for the notes client CLI.

Updates:
  v0.2.0 - 2026-10-18 - Add list/add/edit/delete subcommands.
  v0.1.0 - 2026-10-12 - Launcher flags for logging, settings summary and GUI toggle.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the notes client launcher."""
    parser = argparse.ArgumentParser(description="Notes client launcher")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )
    parser.add_argument(
        "--verbose-http",
        action="store_true",
        help="Log every request sent to the notes service.",
    )
    parser.add_argument(
        "--gui",
        dest="gui",
        action="store_true",
        default=None,
        help="Launch the PySide6 interface (default behaviour).",
    )
    parser.add_argument(
        "--no-gui",
        dest="gui",
        action="store_false",
        help="Skip launching the GUI and exit after checking the configuration.",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="Print every note held by the notes service.")

    add_parser = subparsers.add_parser("add", help="Create a new note.")
    add_parser.add_argument("title", type=str, help="Title of the new note.")
    add_parser.add_argument("--body", type=str, default="", help="Body text of the new note.")

    edit_parser = subparsers.add_parser("edit", help="Update the title and/or body of a note.")
    edit_parser.add_argument("note_id", type=str, help="Identifier of the note to update.")
    edit_parser.add_argument("--title", type=str, default=None, help="Replacement title.")
    edit_parser.add_argument("--body", type=str, default=None, help="Replacement body text.")

    delete_parser = subparsers.add_parser("delete", help="Delete a note.")
    delete_parser.add_argument("note_id", type=str, help="Identifier of the note to delete.")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the notes client launcher."""
    return build_parser().parse_args(argv)
