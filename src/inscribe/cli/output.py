"""
CLI Output Utilities

Machine-aware output functions. Dry-run previews own stdout, so errors
and summaries go to stderr unless JSON was requested.
"""

import json
from typing import Optional

import typer
from rich.console import Console as RichConsole
from rich.table import Table

from inscribe.cli.config import CLIConfig
from inscribe.schemas import BatchResult


_err_console = RichConsole(stderr=True)


def print_json(data: dict, minified: Optional[bool] = None) -> None:
    """
    Print JSON data to stdout.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        typer.echo(json.dumps(data, separators=(',', ':')))
    else:
        typer.echo(json.dumps(data, indent=2))


def structured_error(code: str, message: str) -> dict:
    """
    Create a structured error object for JSON output.

    Args:
        code: Error code (e.g., "CONFIGURATION_ERROR", "INVALID_LINE_NUMBER")
        message: Human-readable error message

    Returns:
        Structured error dictionary
    """
    return {
        "status": "error",
        "code": code,
        "message": message
    }


def print_error(message: str, code: Optional[str] = None, json_output: bool = False) -> None:
    """
    Report an error.

    With json_output, prints a structured error object on stdout.
    Otherwise prints "Error: ..." on stderr, styled in human mode.
    """
    if json_output:
        print_json(structured_error(code=code or "ERROR", message=message))
        return

    if CLIConfig.is_machine_mode():
        typer.echo(f"Error: {message}", err=True)
    else:
        _err_console.print(f"[red]Error:[/red] {message}", highlight=False)


def batch_payload(batch: BatchResult) -> dict:
    """JSON-ready view of a batch, including the derived counts."""
    payload = batch.model_dump()
    payload["succeeded"] = batch.succeeded
    payload["failed"] = batch.failed
    payload["exit_code"] = batch.exit_code
    return payload


def print_batch_summary(batch: BatchResult) -> None:
    """
    Print a per-file table on stderr (human mode only).
    """
    if CLIConfig.is_machine_mode():
        return

    table = Table(title="it", show_lines=False)
    table.add_column("File", style="cyan")
    table.add_column("Operation")
    table.add_column("Lines", justify="right")
    table.add_column("Status")

    for result in batch.results:
        if result.success:
            lines = f"{result.lines_before} -> {result.lines_after}"
            status = "[green]dry run[/green]" if result.dry_run else "[green]ok[/green]"
            if result.backup_path:
                status += f" [dim](backup {result.backup_path})[/dim]"
        else:
            lines = "-"
            status = f"[red]{result.error_code}[/red]"
        table.add_row(result.file_path, result.operation, lines, status)

    for skipped in batch.skipped:
        table.add_row(skipped, "-", "-", "[yellow]skipped[/yellow]")

    _err_console.print(table)
