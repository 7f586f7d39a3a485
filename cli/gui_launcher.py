"""Default CLI behaviour for launching the notes client GUI."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, cast

from .utils import print_and_log

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    import argparse
    from collections.abc import Callable

    from config import NotesClientSettings
    from core import NotesWorkspace


def run_default_mode(
    workspace: NotesWorkspace,
    settings: NotesClientSettings,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    """Print readiness messages and optionally launch the GUI."""
    print_and_log(
        logger,
        logging.INFO,
        f"Notes client ready. Service at {settings.api_base_url}{settings.notes_path}",
    )
    launch_requested = args.gui if args.gui is not None else True
    if not launch_requested:
        return 0

    try:
        gui_module = importlib.import_module("gui")
    except ModuleNotFoundError as exc:  # pragma: no cover - import failure path
        logger.error(
            "GUI launch requested but dependency %s is missing. Install the project with "
            "`pip install -e .` or rerun with --no-gui.",
            exc.name,
        )
        return 4
    launch_callable = cast(
        "Callable[[NotesWorkspace, NotesClientSettings], int]",
        gui_module.launch_notes_client,
    )
    dependency_error_type = gui_module.GuiDependencyError

    try:
        return launch_callable(workspace, settings)
    except dependency_error_type as exc:
        logger.error("Unable to start GUI: %s", exc)
        return 4
