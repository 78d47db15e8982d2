"""
BatchDriver: apply one operation to every file in a batch.

Per file, in command-line order:
1. Check the target is writable (skipped in dry-run)
2. Read it into a line buffer (FileEditor)
3. Copy it to <path>.bak if requested (FileEditor)
4. Compute the new buffer (engine.apply)
5. Print a preview (dry-run) or write it back atomically (FileEditor)

Files are independent. A failure is recorded in that file's
MutationResult and the batch moves on, unless stop_on_error is set.
"""

import sys
from typing import Any, Dict, Optional, Sequence, TextIO

from inscribe.exceptions import FileOperationError, MutationError
from inscribe.logging_config import logger
from inscribe.schemas import BatchResult, MutationResult, Operation

from . import engine
from .config import MUTATION_DEFAULTS
from .editor import FileEditor, FileSnapshot


class BatchDriver:
    """
    Main entry point for running a line mutation over several files.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        emit_previews: bool = True,
        preview_stream: Optional[TextIO] = None,
    ):
        """
        Initialize batch driver.

        Args:
            config: Optional config overrides (merges with MUTATION_DEFAULTS)
            emit_previews: Print dry-run previews as files are processed
            preview_stream: Where previews go (defaults to sys.stdout)
        """
        self.config = {**MUTATION_DEFAULTS, **(config or {})}
        self.editor = FileEditor(self.config)
        self.emit_previews = emit_previews
        self.preview_stream = preview_stream

    def run(
        self,
        file_paths: Sequence[str],
        op: Operation,
        backup: bool = False,
        dry_run: bool = False,
    ) -> BatchResult:
        """
        Process every file in order.

        Args:
            file_paths: Non-empty ordered list of target paths
            op: Validated operation to apply to each file
            backup: Write <path>.bak before mutating
            dry_run: Preview only, never write

        Returns:
            BatchResult with one MutationResult per attempted file
        """
        batch = BatchResult()
        stop_on_error = self.config["stop_on_error"]

        for index, file_path in enumerate(file_paths):
            result = self.process_file(file_path, op, backup=backup, dry_run=dry_run)
            batch.results.append(result)

            if not result.success and stop_on_error:
                batch.halted = True
                batch.skipped = [str(p) for p in file_paths[index + 1:]]
                if batch.skipped:
                    logger.warning(
                        f"Stopping after failure in {file_path}; "
                        f"{len(batch.skipped)} file(s) not processed"
                    )
                break

        logger.info(
            f"Batch finished: {batch.succeeded} succeeded, {batch.failed} failed"
            + (" (halted)" if batch.halted else "")
        )
        return batch

    def process_file(
        self,
        file_path: str,
        op: Operation,
        backup: bool = False,
        dry_run: bool = False,
    ) -> MutationResult:
        """
        Apply op to a single file.

        Never raises for per-file problems; they are reported in the result.
        """
        file_path = str(file_path)
        logger.info(f"{op.describe()} in {file_path}" + (" (dry run)" if dry_run else ""))

        try:
            if not dry_run:
                self.editor.check_writable(file_path)

            snapshot = self.editor.read(file_path)

            backup_path = None
            if backup:
                backup_path = self._backup(snapshot, dry_run)

            new_lines = engine.apply(snapshot.lines, op)

            preview = None
            if dry_run:
                preview = self._preview(snapshot, new_lines)
            else:
                content = self.editor.render(new_lines, self.editor.line_ending_for(snapshot))
                self.editor.write(file_path, content, bom=snapshot.bom)
                logger.info(f"Wrote {len(new_lines)} line(s) to {file_path}")

        except MutationError as e:
            message = f"Cannot {op.describe()} in '{file_path}': {e}"
            logger.error(message)
            return self._failure(file_path, op, dry_run, message, e.code)
        except FileOperationError as e:
            logger.error(e.message)
            return self._failure(file_path, op, dry_run, e.message, e.code)

        return MutationResult(
            file_path=file_path,
            operation=op.kind,
            success=True,
            dry_run=dry_run,
            lines_before=len(snapshot.lines),
            lines_after=len(new_lines),
            backup_path=backup_path,
            preview=preview,
        )

    def _backup(self, snapshot: FileSnapshot, dry_run: bool) -> Optional[str]:
        if dry_run:
            logger.debug(f"Dry run: not writing a backup of {snapshot.path}")
            return None
        if not snapshot.exists:
            logger.debug(f"{snapshot.path} does not exist yet, nothing to back up")
            return None
        return self.editor.create_backup(snapshot.path)

    def _preview(self, snapshot: FileSnapshot, new_lines: Sequence[str]) -> str:
        if self.config["preview_format"] == "diff":
            preview = self.editor.generate_unified_diff(snapshot.path, snapshot.lines, new_lines)
        else:
            preview = self.editor.render(new_lines, "\n")

        if self.emit_previews:
            stream = self.preview_stream if self.preview_stream is not None else sys.stdout
            stream.write(preview)
            stream.flush()

        return preview

    @staticmethod
    def _failure(
        file_path: str,
        op: Operation,
        dry_run: bool,
        message: str,
        code: str,
    ) -> MutationResult:
        return MutationResult(
            file_path=file_path,
            operation=op.kind,
            success=False,
            dry_run=dry_run,
            error=message,
            error_code=code,
        )
