"""
Mutation package: positional line edits.

Provides the pure line engine, the flag resolver that builds an operation,
text sources for the payload, and the file editor and batch driver that
apply an operation to files on disk.
"""

from .engine import apply, validate_operation, LineBuffer
from .resolver import build_operation, parse_clear_range, select_text_source
from .text_source import TextSource, LiteralText, StdinText
from .editor import FileEditor, FileSnapshot, split_lines, detect_line_ending
from .driver import BatchDriver
from .config import (
    MUTATION_DEFAULTS,
    LINE_ENDINGS,
    LINE_ENDING_POLICIES,
    PREVIEW_FORMATS,
    get_mutation_config,
)

__all__ = [
    # Engine
    "apply",
    "validate_operation",
    "LineBuffer",

    # Request building
    "build_operation",
    "parse_clear_range",
    "select_text_source",
    "TextSource",
    "LiteralText",
    "StdinText",

    # Files
    "FileEditor",
    "FileSnapshot",
    "split_lines",
    "detect_line_ending",
    "BatchDriver",

    # Configuration
    "MUTATION_DEFAULTS",
    "LINE_ENDINGS",
    "LINE_ENDING_POLICIES",
    "PREVIEW_FORMATS",
    "get_mutation_config",
]
