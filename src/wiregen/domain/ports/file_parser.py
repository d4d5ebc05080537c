"""File parser port.

Defines contract for extracting bindings and injection sites from one file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from wiregen.domain.model.scan_result import ScanResult


class FileParserPort(Protocol):
    """Contract for single-file parsers.

    Implementations must be safe to call from several threads at once:
    the scanner parses independent files in parallel.
    """

    def parse_file(self, path: Path) -> ScanResult:
        """Parse one source file.

        Args:
            path: Absolute path to the source file

        Returns:
            Bindings and injections declared in the file

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        ...
