from pydantic import BaseModel, Field, field_validator
from typing import Annotated, List, Optional, Literal, Union


def _reject_line_breaks(text: Optional[str]) -> Optional[str]:
    if text is not None and ("\n" in text or "\r" in text):
        raise ValueError("text must be a single line (no line breaks)")
    return text


class InsertAt(BaseModel):
    """
    Insert text before a 1-based line, or replace that line when overwrite is set.
    """
    kind: Literal["insert"] = "insert"
    line: int = 1
    text: Optional[str] = None
    overwrite: bool = False

    @field_validator("text")
    @classmethod
    def text_is_single_line(cls, v: Optional[str]) -> Optional[str]:
        return _reject_line_breaks(v)

    def describe(self) -> str:
        verb = "overwrite" if self.overwrite else "insert"
        return f"{verb} at line {self.line}"


class AppendEnd(BaseModel):
    """
    Add text as a new final line.
    """
    kind: Literal["append"] = "append"
    text: Optional[str] = None

    @field_validator("text")
    @classmethod
    def text_is_single_line(cls, v: Optional[str]) -> Optional[str]:
        return _reject_line_breaks(v)

    def describe(self) -> str:
        return "append"


class ClearRange(BaseModel):
    """
    Remove lines start..end inclusive (1-based), or start..EOF when end is None.
    """
    kind: Literal["clear"] = "clear"
    start: int
    end: Optional[int] = None

    def describe(self) -> str:
        if self.end is None:
            return f"clear lines {self.start}-EOF"
        return f"clear lines {self.start}-{self.end}"


Operation = Annotated[Union[InsertAt, AppendEnd, ClearRange], Field(discriminator="kind")]


class MutationResult(BaseModel):
    """
    Outcome of applying one operation to one file.
    """
    file_path: str
    operation: Literal["insert", "append", "clear"]
    success: bool
    dry_run: bool = False
    lines_before: int = 0
    lines_after: int = 0
    backup_path: Optional[str] = None
    preview: Optional[str] = None  # Rendered content or diff in dry-run mode
    error: Optional[str] = None
    error_code: Optional[str] = None


class BatchResult(BaseModel):
    """
    Ordered per-file outcomes for one invocation.
    """
    results: List[MutationResult] = Field(default_factory=list)
    halted: bool = False  # True if --stop-on-error ended the batch early
    skipped: List[str] = Field(default_factory=list)  # Paths never attempted after a halt

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def exit_code(self) -> int:
        return 0 if self.failed == 0 else 1
