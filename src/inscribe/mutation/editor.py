"""
FileEditor: read target files into line buffers and write them back safely.

Handles the on-disk side of a mutation: .bak copies, atomic writes,
encoding, and line ending detection (LF/CRLF).
"""

import codecs
import difflib
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from inscribe.exceptions import BackupError, FileReadError, FileWriteError
from inscribe.logging_config import logger
from .config import LINE_ENDINGS, MUTATION_DEFAULTS


@dataclass
class FileSnapshot:
    """A target file as it was read, before any mutation."""
    path: str
    exists: bool
    raw: bytes = b""
    lines: List[str] = field(default_factory=list)
    line_ending: str = "\n"
    bom: bool = False  # UTF-8 byte order mark stripped from the first line


def split_lines(content: str) -> List[str]:
    """
    Split file content into newline-stripped lines.

    Only LF and CRLF end a line. A final terminator does not produce an
    extra empty line, and empty content is an empty buffer.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def detect_line_ending(content: str) -> str:
    """
    Detect line ending style (LF vs CRLF).

    Returns:
        '\r\n' for CRLF, '\n' for LF
    """
    if '\r\n' in content:
        return '\r\n'
    return '\n'


class FileEditor:
    """
    Read, back up and rewrite files for line mutations.

    Features:
    - <path>.bak backups, byte-identical to the original
    - Atomic writes (temp file + rename), file mode kept, symlinks followed
    - UTF-8 byte order mark kept at the start of the file
    - Configurable encoding
    - Line ending preservation (LF/CRLF) or forced LF/CRLF
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize file editor with optional config.

        Args:
            config: Optional config overrides (merges with MUTATION_DEFAULTS)
        """
        self.config = {**MUTATION_DEFAULTS, **(config or {})}

    def read(self, file_path: str) -> FileSnapshot:
        """
        Read a file into a snapshot.

        A missing file reads as empty when create_missing is enabled.

        Raises:
            FileReadError: Directory, missing file, or unreadable/undecodable content
        """
        path = Path(file_path)

        if path.is_dir():
            raise FileReadError(file_path, f"'{file_path}' is a directory, not a file.")

        if not path.exists():
            if self.config["create_missing"]:
                logger.debug(f"{file_path} does not exist, starting from an empty buffer")
                return FileSnapshot(path=file_path, exists=False)
            raise FileReadError(file_path, f"'{file_path}' does not exist.")

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise FileReadError(file_path, f"Cannot read '{file_path}': {e}", e) from e

        bom = self._is_utf8() and raw.startswith(codecs.BOM_UTF8)
        body = raw[len(codecs.BOM_UTF8):] if bom else raw

        try:
            content = body.decode(self.config["encoding"])
        except UnicodeDecodeError as e:
            raise FileReadError(
                file_path,
                f"Cannot decode '{file_path}' as {self.config['encoding']}: {e}",
                e,
            ) from e

        return FileSnapshot(
            path=file_path,
            exists=True,
            raw=raw,
            lines=split_lines(content),
            line_ending=detect_line_ending(content),
            bom=bom,
        )

    def _is_utf8(self) -> bool:
        try:
            return codecs.lookup(self.config["encoding"]).name == "utf-8"
        except LookupError:
            return False

    def check_writable(self, file_path: str) -> None:
        """
        Fail early on an existing file this process may not write.

        Raises:
            FileWriteError: If the file exists and is not writable
        """
        path = Path(file_path)
        if path.exists() and not os.access(path, os.W_OK):
            raise FileWriteError(file_path, f"No write permission for '{file_path}'.")

    def create_backup(self, file_path: str) -> str:
        """
        Copy a file to <path><backup_suffix> (".bak" by default).

        Returns:
            Path to the backup file

        Raises:
            BackupError: If the copy fails
        """
        backup_path = f"{file_path}{self.config['backup_suffix']}"

        # copy2 would otherwise copy *into* a directory of that name
        if Path(backup_path).is_dir():
            raise BackupError(file_path, f"Failed to create backup '{backup_path}': it is a directory")

        try:
            shutil.copy2(file_path, backup_path)
        except OSError as e:
            raise BackupError(
                file_path,
                f"Failed to create backup '{backup_path}': {e}",
                e,
            ) from e

        logger.debug(f"Created backup: {backup_path}")
        return backup_path

    def line_ending_for(self, snapshot: FileSnapshot) -> str:
        """Terminator to write, per the line_ending policy."""
        policy = self.config["line_ending"]
        if policy == "preserve":
            return snapshot.line_ending
        return LINE_ENDINGS[policy]

    def render(self, lines: Sequence[str], line_ending: str = "\n") -> str:
        """Join lines, each followed by line_ending. No lines renders as ""."""
        return "".join(f"{line}{line_ending}" for line in lines)

    def write(self, file_path: str, content: str, bom: bool = False) -> None:
        """
        Write content to file_path, replacing what was there.

        Symlinks are written through to their target. A file with other
        hard links is rewritten in place so every link sees the new content.

        Raises:
            FileWriteError: If encoding or writing fails
        """
        try:
            data = content.encode(self.config["encoding"])
        except UnicodeEncodeError as e:
            raise FileWriteError(
                file_path,
                f"Cannot encode new content for '{file_path}' as {self.config['encoding']}: {e}",
                e,
            ) from e

        if bom:
            data = codecs.BOM_UTF8 + data

        target = os.path.realpath(file_path)
        if self.config["atomic_write"] and not self._has_other_links(target):
            self._atomic_write(target, data)
        else:
            try:
                with open(target, 'wb') as f:
                    f.write(data)
            except OSError as e:
                raise FileWriteError(file_path, f"Failed to write '{file_path}': {e}", e) from e

    @staticmethod
    def _has_other_links(target: str) -> bool:
        try:
            return os.stat(target).st_nlink > 1
        except OSError:
            return False

    def _atomic_write(self, file_path: str, data: bytes) -> None:
        """
        Write file atomically using temp file + rename.

        The original is untouched unless the rename succeeds.
        """
        path = Path(file_path)

        try:
            # Same directory as target so the rename stays on one filesystem
            fd, temp_path = tempfile.mkstemp(
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp"
            )
        except OSError as e:
            raise FileWriteError(file_path, f"Failed to create temp file for '{file_path}': {e}", e) from e

        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
            if path.exists():
                shutil.copymode(str(path), temp_path)
            os.replace(temp_path, str(path))
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                logger.warning(f"Could not remove temp file {temp_path}")
            raise FileWriteError(file_path, f"Failed to write '{file_path}': {e}", e) from e

        logger.debug(f"Atomic write completed: {file_path}")

    def generate_unified_diff(
        self,
        file_path: str,
        original_lines: Sequence[str],
        modified_lines: Sequence[str],
    ) -> str:
        """
        Generate unified diff between original and modified lines.

        Returns:
            Diff text, newline-terminated, or "" when nothing changed
        """
        diff_lines = list(difflib.unified_diff(
            list(original_lines),
            list(modified_lines),
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
            lineterm=''
        ))
        if not diff_lines:
            return ""
        return "\n".join(diff_lines) + "\n"
