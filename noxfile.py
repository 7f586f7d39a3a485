"""noxfile.py - Nox sessions for the notes client.

Updates:
  v0.1.0 - 2026-10-19 - Ruff/Pyright/Pytest quality gates run from `.venv`.

Install the project with `pip install -e .[dev]` inside `.venv` before running these sessions.
This file defines automation sessions:
- format: format code with ruff
- lint: run ruff lint checks
- typecheck: run pyright
- test: run pytest with coverage
- all: run the full quality gate suite

Sessions run in the host Python environment (no isolated venv) and invoke
tools from the project `.venv`.
"""

from __future__ import annotations

import sys
from pathlib import Path

import nox

CODE_LOCATIONS: tuple[str, ...] = (
    "main.py",
    "cli",
    "config",
    "core",
    "gui",
    "models",
    "tests",
)

_PYTEST_ARGS: tuple[str, ...] = (
    "-n",
    "auto",
    "--cov=core",
    "--cov=models",
    "--cov=config",
    "--cov-report=term-missing",
    "--cov-fail-under=85",
    "tests",
)


def _venv_executable(command: str) -> Path:
    """Return the path to *command* inside the project virtual environment."""
    venv_dir = Path(".venv")
    if sys.platform == "win32":
        return venv_dir / "Scripts" / f"{command}.exe"
    return venv_dir / "bin" / command


def _require_venv_tool(session: nox.Session, command: str) -> str:
    """Return the `.venv` tool path, failing with guidance when missing."""
    candidate = _venv_executable(command)
    if not candidate.exists():
        session.error(
            f"Missing {candidate}; run `python -m venv .venv && pip install -e .[dev]` first."
        )
    return str(candidate)


@nox.session(venv_backend="none")
def format(session: nox.Session) -> None:
    """Format code using ruff."""
    ruff = _require_venv_tool(session, "ruff")
    session.run(ruff, "format", *CODE_LOCATIONS, external=True)


@nox.session(venv_backend="none")
def lint(session: nox.Session) -> None:
    """Lint code using ruff."""
    ruff = _require_venv_tool(session, "ruff")
    session.run(ruff, "check", *CODE_LOCATIONS, external=True)


@nox.session(venv_backend="none")
def typecheck(session: nox.Session) -> None:
    """Run pyright with the strict settings from pyproject.toml."""
    session.run(_require_venv_tool(session, "pyright"), external=True)


@nox.session(venv_backend="none")
def test(session: nox.Session) -> None:
    """Run pytest with coverage over the non-GUI packages."""
    pytest = _require_venv_tool(session, "pytest")
    session.run(pytest, *_PYTEST_ARGS, *session.posargs, external=True)


@nox.session(venv_backend="none")
def all(session: nox.Session) -> None:
    """Run lint, format check, typecheck and tests in sequence."""
    ruff = _require_venv_tool(session, "ruff")
    session.run(ruff, "check", *CODE_LOCATIONS, external=True)
    session.run(ruff, "format", "--check", *CODE_LOCATIONS, external=True)
    session.run(_require_venv_tool(session, "pyright"), external=True)
    session.run(_require_venv_tool(session, "pytest"), *_PYTEST_ARGS, external=True)
