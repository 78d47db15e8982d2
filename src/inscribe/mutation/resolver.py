"""
Turn raw command-line flags into one validated Operation.

All flag conflicts are rejected here, before any file is opened, so the
engine and batch driver only ever receive a well-formed request.
"""

from typing import Optional, TextIO, Tuple

from pydantic import ValidationError

from inscribe.exceptions import ConfigurationError
from inscribe.logging_config import logger
from inscribe.schemas import AppendEnd, ClearRange, InsertAt, Operation
from .engine import validate_operation
from .text_source import LiteralText, StdinText, TextSource


def parse_clear_range(value: str) -> Tuple[int, Optional[int]]:
    """
    Parse a --clear argument of the form START or START,END.

    Returns:
        (start, end) with end None for "to end of file"

    Raises:
        ConfigurationError: On malformed numbers, zero, or start > end
    """
    parts = [p.strip() for p in value.split(",")]

    if len(parts) == 1:
        start = _parse_line(parts[0], "start")
        if start == 0:
            raise ConfigurationError("Line numbers must be greater than 0")
        return start, None

    if len(parts) == 2:
        start = _parse_line(parts[0], "start")
        end = _parse_line(parts[1], "end")
        if start == 0 or end == 0:
            raise ConfigurationError("Line numbers must be greater than 0")
        if start > end:
            raise ConfigurationError("Start line must be less than or equal to end line")
        return start, end

    raise ConfigurationError("Expected format: START or START,END")


def _parse_line(raw: str, which: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        raise ConfigurationError(f"Invalid {which} line number: '{raw}'")
    return value


def select_text_source(
    literal: Optional[str],
    interactive: bool,
    stdin: Optional[TextIO] = None,
) -> TextSource:
    """
    Pick where the payload comes from.

    Without a literal and without --interactive the payload is an empty
    line, so that `it file.txt` appends a blank line.
    """
    if interactive:
        if literal is not None:
            raise ConfigurationError("--interactive cannot be combined with literal text")
        return StdinText(stdin)
    return LiteralText(literal if literal is not None else "")


def build_operation(
    insert: Optional[str] = None,
    append: Optional[str] = None,
    clear: Optional[str] = None,
    line: Optional[int] = None,
    overwrite: bool = False,
    interactive: bool = False,
    stdin: Optional[TextIO] = None,
) -> Operation:
    """
    Build the single Operation for this invocation.

    Args:
        insert: --insert TEXT
        append: --append TEXT
        clear: --clear START[,END]
        line: --line N (insert/overwrite target)
        overwrite: --overwrite
        interactive: --interactive (read text from stdin)
        stdin: Stream to read interactive text from (defaults to sys.stdin)

    Returns:
        InsertAt, AppendEnd or ClearRange

    Raises:
        ConfigurationError: Conflicting or malformed flags
        InvalidLineNumberError: --line below 1
    """
    chosen = [
        flag for flag, value in (("--insert", insert), ("--append", append), ("--clear", clear))
        if value is not None
    ]
    if len(chosen) > 1:
        raise ConfigurationError(f"Options {' and '.join(chosen)} are mutually exclusive")

    if clear is not None:
        for flag, present in (("--overwrite", overwrite), ("--line", line is not None),
                              ("--interactive", interactive)):
            if present:
                raise ConfigurationError(f"{flag} cannot be used with --clear")
        start, end = parse_clear_range(clear)
        op = ClearRange(start=start, end=end)
        validate_operation(op)
        return op

    if append is not None:
        for flag, present in (("--overwrite", overwrite), ("--line", line is not None)):
            if present:
                raise ConfigurationError(f"{flag} cannot be used with --append")
        source = select_text_source(append, interactive, stdin)
        return _with_text(AppendEnd(), source)

    source = select_text_source(insert, interactive, stdin)

    # --line or --overwrite alone still mean insert; bare `it FILE` appends
    if insert is not None or line is not None or overwrite:
        op = InsertAt(line=1 if line is None else line, overwrite=overwrite)
        validate_operation(op)
        return _with_text(op, source)

    return _with_text(AppendEnd(), source)


def _with_text(op: Operation, source: TextSource) -> Operation:
    text = source.resolve()
    logger.debug(f"Resolved text from {source!r} for {op.describe()}")
    try:
        return type(op)(**{**op.model_dump(), "text": text})
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ConfigurationError(f"Invalid text for {op.describe()}: {messages}") from e
