from __future__ import annotations

import sys
from typing import Optional

import typer
from pydantic import ValidationError

from recordkit.config import get_settings
from recordkit.domain.models import Record
from recordkit.driver import build_demo_records, run_demo
from recordkit.reporter import print_records
from recordkit.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Record construction demo CLI.")

log = get_logger(__name__)


def _setup_logging() -> None:
    """
    Configure logging from settings, falling back to defaults when the
    environment holds invalid values. Record output never depends on it.
    """
    try:
        settings = get_settings()
        configure_logging(level=settings.log_level, json_logs=settings.log_json)
    except (ValidationError, ValueError) as exc:
        configure_logging()
        log.warning("invalid logging settings, using defaults: %s", exc)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """
    Run the canonical demo when no command is given.
    """
    if ctx.invoked_subcommand is None:
        _setup_logging()
        run_demo()


@app.command()
def demo() -> None:
    """
    Build the default, explicit, and copied records and print each one.
    """
    _setup_logging()
    run_demo()


@app.command()
def show(
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Record name. Give together with --value.",
    ),
    value: Optional[int] = typer.Option(
        None,
        "--value",
        "-v",
        help="Record value. Give together with --name.",
    ),
) -> None:
    """
    Print a single record.

    Without options the default record is shown; otherwise both fields are
    required.
    """
    _setup_logging()
    if name is None and value is None:
        record = Record()
    elif name is None or value is None:
        raise typer.BadParameter("--name and --value must be given together")
    else:
        record = Record.of(name, value)
    record.render()


@app.command()
def table() -> None:
    """
    Print the demo records as a table.
    """
    _setup_logging()
    print_records(build_demo_records())


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} "
        f"json_logs={settings.log_json}"
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
