from enum import Enum
from typing import List, Optional

import typer

from inscribe import __version__
from inscribe.exceptions import ConfigurationError, InscribeError
from inscribe.logging_config import logger, setup_logging
from inscribe.mutation import BatchDriver, build_operation, get_mutation_config
from inscribe.mutation.config import validate_mutation_config
from inscribe.cli.config import CLIConfig
from inscribe.cli.output import batch_payload, print_batch_summary, print_error, print_json


EXAMPLES = """
Examples:

  it -i "New Line" -l 2 file.txt          insert at line 2

  it -i "Overwritten" -l 2 -o file.txt    overwrite line 2

  it -a "Appended" file.txt               append a line

  it -z 2 file.txt                        clear from line 2 to the end

  it -z 2,3 file.txt                      clear lines 2 to 3

  it file.txt                             append an empty line

  echo "New Line" | it -I -l 2 file.txt   insert stdin text at line 2

  it -b -a "Appended" a.txt b.txt         back up, then append to both
"""


class LineEnding(str, Enum):
    preserve = "preserve"
    lf = "lf"
    crlf = "crlf"


app = typer.Typer(add_completion=False)


def _version_callback(value: bool):
    if value:
        typer.echo(f"it {__version__}")
        raise typer.Exit()


@app.command(epilog=EXAMPLES)
def main(
    files: List[str] = typer.Argument(..., help="The file(s) to modify", metavar="FILE..."),
    insert: Optional[str] = typer.Option(
        None, "--insert", "-i", metavar="TEXT",
        help="Insert text at the line given by --line (default: first line)",
    ),
    append: Optional[str] = typer.Option(
        None, "--append", "-a", metavar="TEXT",
        help="Add text as the last line of the file",
    ),
    clear: Optional[str] = typer.Option(
        None, "--clear", "-z", metavar="START[,END]",
        help="Clear from START to end of file, or lines START to END inclusive",
    ),
    line: Optional[int] = typer.Option(
        None, "--line", "-l", metavar="NUMBER",
        help="The line number to insert or overwrite at",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", "-o", help="Overwrite the line instead of inserting"),
    backup: bool = typer.Option(False, "--backup", "-b", help="Copy each file to <file>.bak before modifying it"),
    interactive: bool = typer.Option(False, "--interactive", "-I", help="Read the text to insert or append from stdin"),
    dry_run: bool = typer.Option(False, "--dry-run", "-d", help="Print the result to stdout without modifying files"),
    diff: bool = typer.Option(False, "--diff", help="With --dry-run, print a unified diff instead of the full content"),
    stop_on_error: bool = typer.Option(False, "--stop-on-error", help="Stop at the first file that fails"),
    line_ending: Optional[LineEnding] = typer.Option(
        None, "--line-ending", case_sensitive=False,
        help="Line terminator to write (default from config: preserve)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print per-file results as JSON"),
    human: bool = typer.Option(False, "--human", "-H", help="Human mode: print a summary table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit",
    ),
):
    """
    Insert, append, overwrite or clear lines in one or more files.
    """
    if human:
        CLIConfig.set_machine_mode(False)
    else:
        CLIConfig.reset()

    if verbose:
        setup_logging(level="DEBUG", suppress_console=False, force=True)

    try:
        config = get_mutation_config()
        if line_ending is not None:
            config["line_ending"] = line_ending.value
        if stop_on_error:
            config["stop_on_error"] = True
        if diff:
            if not dry_run:
                raise ConfigurationError("--diff requires --dry-run")
            config["preview_format"] = "diff"
        validate_mutation_config(config)

        op = build_operation(
            insert=insert,
            append=append,
            clear=clear,
            line=line,
            overwrite=overwrite,
            interactive=interactive,
        )
    except InscribeError as e:
        logger.debug(f"Rejected request: {e}")
        print_error(str(e), code=e.code, json_output=json_output)
        raise typer.Exit(code=CLIConfig.EXIT_CONFIGURATION)

    driver = BatchDriver(config, emit_previews=not json_output)
    batch = driver.run(files, op, backup=backup, dry_run=dry_run)

    if json_output:
        print_json(batch_payload(batch))
    else:
        for result in batch.results:
            if not result.success:
                print_error(result.error, code=result.error_code)
        print_batch_summary(batch)

    raise typer.Exit(code=batch.exit_code)


if __name__ == "__main__":
    app()
