"""
Text sources for insert/append payloads.

The CLI picks one source and resolves it once per invocation, so the engine
only ever sees a plain string.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from inscribe.logging_config import logger


class TextSource(ABC):
    """Where the text payload comes from."""

    @abstractmethod
    def resolve(self) -> str:
        """Return the payload, without a line terminator."""


class LiteralText(TextSource):
    """Text given directly on the command line."""

    def __init__(self, text: str):
        self.text = text

    def resolve(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"LiteralText({self.text!r})"


class StdinText(TextSource):
    """
    Text read from standard input.

    Reads a single line (or everything up to EOF when there is no newline)
    and strips the line terminator. The stream is read once; later calls
    return the cached value.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self._text: Optional[str] = None

    def resolve(self) -> str:
        if self._text is None:
            stream = self.stream if self.stream is not None else sys.stdin
            raw = stream.readline()
            self._text = raw.rstrip("\r\n")
            logger.debug(f"Read {len(self._text)} characters from stdin")
        return self._text

    def __repr__(self) -> str:
        return "StdinText()"
