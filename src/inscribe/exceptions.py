# Custom exceptions for Inscribe

from typing import Optional


class InscribeError(Exception):
    """Base exception for all application-specific errors."""
    code = "INSCRIBE_ERROR"


class ConfigurationError(InscribeError):
    """Raised for conflicting or missing command-line flags and bad config."""
    code = "CONFIGURATION_ERROR"


class MutationError(InscribeError):
    """Raised when an operation cannot be applied to a line buffer."""
    code = "MUTATION_ERROR"


class InvalidLineNumberError(MutationError):
    """Raised when a line number is below 1."""
    code = "INVALID_LINE_NUMBER"

    def __init__(self, line: int):
        self.line = line
        super().__init__(f"Line numbers must be greater than 0 (got {line})")


class InvalidRangeError(MutationError):
    """Raised when a clear range starts after it ends."""
    code = "INVALID_RANGE"

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(
            f"Start line must be less than or equal to end line (got {start},{end})"
        )


class EmptyTextError(MutationError):
    """Raised when an insert or append has no text to place."""
    code = "EMPTY_TEXT"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"No text supplied for '{operation}'")


class FileOperationError(InscribeError):
    """Base for per-file I/O failures."""
    code = "FILE_ERROR"

    def __init__(self, file_path: str, message: str, cause: Optional[BaseException] = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(message)


class FileReadError(FileOperationError):
    """Raised when a target file cannot be read."""
    code = "FILE_READ_ERROR"


class FileWriteError(FileOperationError):
    """Raised when the new content cannot be written back."""
    code = "FILE_WRITE_ERROR"


class BackupError(FileOperationError):
    """Raised when the .bak copy cannot be created."""
    code = "BACKUP_ERROR"
