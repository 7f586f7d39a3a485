"""Application entry point for the notes client.

Updates:
  v0.2.0 - 2026-10-18 - Dispatch list/add/edit/delete commands through the workspace.
  v0.1.0 - 2026-10-12 - Wire settings, logging and the GUI launcher.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cli.commands import COMMAND_SPECS
from cli.gui_launcher import run_default_mode
from cli.parser import parse_args
from cli.runtime import configure_http_logging, setup_logging
from cli.settings_summary import print_settings_summary
from config import SettingsError, load_settings
from core import build_workspace

if TYPE_CHECKING:
    from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, services, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)
    configure_http_logging(args.verbose_http)

    logger = logging.getLogger("notes_client.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        cause = exc.__cause__
        logger.error("Failed to load settings: %s%s", exc, f" ({cause})" if cause else "")
        return 2

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    workspace = build_workspace(settings)
    spec = COMMAND_SPECS.get(getattr(args, "command", None))
    if spec is not None:
        return spec.handler(workspace, args, logger)
    return run_default_mode(workspace, settings, args, logger)


if __name__ == "__main__":
    raise SystemExit(main())
