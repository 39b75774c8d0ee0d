from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import TextIO

import typer

from ..core.config import Settings, get_settings
from ..data.storage import RosterStorage
from ..services.roster import RosterService
from .menu import Session


def _setup_logging(logs_dir: Path, level: str) -> None:
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "roster.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def _resolve_settings(
    data_file: Path | None = None,
    log_level: str | None = None,
    log_dir: Path | None = None,
) -> Settings:
    settings = get_settings()
    overrides: dict = {}
    if data_file is not None:
        overrides["data_file"] = data_file
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if log_dir is not None:
        overrides["log_dir"] = log_dir
    return dataclasses.replace(settings, **overrides)


def run_session(
    settings: Settings,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    service = RosterService()
    storage = RosterStorage(settings.data_file)
    return Session(service, storage, stdin=stdin, stdout=stdout).run()


app = typer.Typer(add_completion=False, help="School roster manager")


@app.command("run")
def cli_run(
    data_file: Path | None = typer.Option(None, help="Roster file (default: $ROSTER_DATA_FILE)"),
    log_level: str | None = typer.Option(None, help="Log level"),
    log_dir: Path | None = typer.Option(None, help="Directory for roster.log"),
) -> None:
    """Start the interactive menu."""
    settings = _resolve_settings(data_file, log_level, log_dir)
    _setup_logging(settings.log_dir, settings.log_level)
    run_session(settings)


@app.command("list")
def cli_list(
    data_file: Path | None = typer.Option(None, help="Roster file (default: $ROSTER_DATA_FILE)"),
) -> None:
    """Print every saved record without starting a session."""
    settings = _resolve_settings(data_file)
    result = RosterStorage(settings.data_file).load()
    if not result.ok:
        typer.echo(f"Warning: error loading data: {result.error}")
        raise typer.Exit(code=1)
    if not result.people:
        typer.echo("No records.")
        return
    for p in result.people:
        typer.echo(p.describe())


def main() -> None:
    app()
