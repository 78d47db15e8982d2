"""
Line mutation engine: pure positional edits over a list of lines.

Line numbers are 1-based as the user types them. Nothing here touches the
filesystem; every function returns a new list and leaves its input alone.
"""

from typing import List, Optional, Sequence

from inscribe.exceptions import (
    EmptyTextError,
    InvalidLineNumberError,
    InvalidRangeError,
)
from inscribe.schemas import AppendEnd, ClearRange, InsertAt, Operation


LineBuffer = List[str]


def validate_operation(op: Operation) -> None:
    """
    Check line numbers and ranges without needing a buffer.

    Raises:
        InvalidLineNumberError: A line, start or end is below 1.
        InvalidRangeError: start > end.
    """
    if isinstance(op, InsertAt):
        if op.line < 1:
            raise InvalidLineNumberError(op.line)
    elif isinstance(op, ClearRange):
        if op.start < 1:
            raise InvalidLineNumberError(op.start)
        if op.end is not None:
            if op.end < 1:
                raise InvalidLineNumberError(op.end)
            if op.start > op.end:
                raise InvalidRangeError(op.start, op.end)


def apply(buffer: Sequence[str], op: Operation) -> LineBuffer:
    """
    Apply one operation to a line buffer.

    Args:
        buffer: Current lines, newline-stripped
        op: InsertAt, AppendEnd or ClearRange

    Returns:
        New list of lines

    Raises:
        MutationError: On invalid line numbers, ranges or missing text
    """
    validate_operation(op)

    if isinstance(op, InsertAt):
        if op.text is None:
            raise EmptyTextError(op.describe())
        return insert_at(buffer, op.line, op.text, op.overwrite)
    if isinstance(op, AppendEnd):
        if op.text is None:
            raise EmptyTextError(op.describe())
        return append_end(buffer, op.text)
    if isinstance(op, ClearRange):
        return clear_range(buffer, op.start, op.end)

    raise TypeError(f"Unsupported operation: {type(op).__name__}")


def insert_at(buffer: Sequence[str], line: int, text: str, overwrite: bool = False) -> LineBuffer:
    lines = list(buffer)
    index = line - 1

    if index >= len(lines):
        # Past EOF: pad with blanks, then text lands on `line` in either mode
        lines.extend([""] * (index - len(lines)))
        lines.append(text)
    elif overwrite:
        lines[index] = text
    else:
        lines.insert(index, text)

    return lines


def append_end(buffer: Sequence[str], text: str) -> LineBuffer:
    lines = list(buffer)
    lines.append(text)
    return lines


def clear_range(buffer: Sequence[str], start: int, end: Optional[int] = None) -> LineBuffer:
    lines = list(buffer)
    start_idx = start - 1

    if start_idx >= len(lines):
        return lines

    end_idx = len(lines) if end is None else min(end, len(lines))
    del lines[start_idx:end_idx]
    return lines
