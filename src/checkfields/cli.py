from __future__ import annotations
import json
import logging
from typing import Optional

import typer
from rich import print as rprint

from .config import resolve_errors
from .engine import validate
from .errors import CheckFieldsError
from .loader import load_document
from .logging_utils import configure_cli_logging

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "-v", "--verbose")):
    configure_cli_logging(verbose)


@app.command()
def check(
    data_path: str = typer.Argument(..., metavar="DATA"),
    schema_path: str = typer.Argument(..., metavar="SCHEMA"),
    errors_path: Optional[str] = typer.Option(None, "-e", "--errors"),
):
    try:
        data = load_document(data_path)
        schema = load_document(schema_path)
        errors = load_document(errors_path) if errors_path else None
    except (OSError, ValueError) as exc:
        rprint(f"[red]Cannot load input:[/red] {exc}")
        raise typer.Exit(code=2)
    if errors is not None and not isinstance(errors, dict):
        rprint(f"[red]Error overrides in {errors_path} must be a table of slots[/red]")
        raise typer.Exit(code=2)
    try:
        errors = resolve_errors(errors)
    except TypeError as exc:
        rprint(f"[red]Invalid error overrides:[/red] {exc}")
        raise typer.Exit(code=2)

    logger.info("Checking %s against %s", data_path, schema_path)
    try:
        validate(data, schema, errors)
    except CheckFieldsError as exc:
        logger.debug("Validation failed in slot %s", exc.slot)
        rprint(f"[red]{exc.reason}[/red]")
        print(json.dumps(exc.record, indent=2, default=repr))
        raise typer.Exit(code=1)
    rprint("[green]OK[/green]")
