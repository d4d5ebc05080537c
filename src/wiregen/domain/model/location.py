"""Source code location value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Exact position of a declaration in a scanned source file.

    Attributes:
        file: Path of the source file, as seen by the scanner
        line: Line number (1-based, must be > 0)
        column: Column number in UTF-8 bytes (1-based, must be > 0)
        offset: Byte offset from the start of the file (0-based, must be >= 0)
    """

    file: str
    line: int
    column: int
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    def __str__(self) -> str:
        """Format as file:line:column."""
        return f"{self.file}:{self.line}:{self.column}"
