"""
Inscribe - positional line edits for text files.

Insert, append, overwrite or clear lines by number across one or more
files, with optional .bak backups and dry-run previews.
"""

__version__ = "1.0.0"

from inscribe.schemas import AppendEnd, BatchResult, ClearRange, InsertAt, MutationResult
from inscribe.mutation import BatchDriver, apply, build_operation

__all__ = [
    "__version__",
    "apply",
    "build_operation",
    "BatchDriver",
    "InsertAt",
    "AppendEnd",
    "ClearRange",
    "MutationResult",
    "BatchResult",
]
