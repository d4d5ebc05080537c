"""AST-based file parser adapter.

Implements FileParserPort using Python AST and DependencyVisitor.
"""

from __future__ import annotations

import ast
import codecs
from typing import TYPE_CHECKING

from wiregen.domain.exceptions.parsing import ParsingError
from wiregen.domain.model.configuration import MarkerNames
from wiregen.domain.ports.file_parser import FileParserPort
from wiregen.infrastructure.analyzers.base import SourceIndex
from wiregen.infrastructure.analyzers.dependency_visitor import DependencyVisitor

if TYPE_CHECKING:
    from pathlib import Path

    from wiregen.domain.model.scan_result import ScanResult


class ASTFileParser(FileParserPort):
    """Parser using Python AST to extract bindings and injection sites.

    Stateless between parse_file() calls, safe to share across threads.

    FAIL-FIRST: raises ParsingError on any read or syntax problem.
    """

    def __init__(self, markers: MarkerNames | None = None) -> None:
        """Initialize parser.

        Args:
            markers: Marker names to recognise (default names if None)
        """
        self._markers = markers or MarkerNames()

    @property
    def markers(self) -> MarkerNames:
        """Marker names recognised by this parser."""
        return self._markers

    def parse_file(self, path: Path) -> ScanResult:
        """Parse single Python file.

        Args:
            path: Path to .py file

        Returns:
            Bindings and injections declared in the file

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        # Bytes, not read_text(): newline translation would shift byte offsets
        try:
            raw = path.read_bytes()
            source = raw.decode("utf-8-sig")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except IsADirectoryError as e:
            raise ParsingError(path, "is a directory") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e
        except OSError as e:
            raise ParsingError(path, f"read error: {e}") from e

        # decode() dropped the BOM; offsets still count it
        byte_offset = len(codecs.BOM_UTF8) if raw.startswith(codecs.BOM_UTF8) else 0
        return self.parse_source(source, path, byte_offset=byte_offset)

    def parse_source(self, source: str, path: Path, *, byte_offset: int = 0) -> ScanResult:
        """Parse already loaded source text.

        Args:
            source: Decoded source text
            path: Path reported in locations
            byte_offset: File bytes preceding source (a stripped BOM)

        Returns:
            Bindings and injections declared in the source

        Raises:
            ParsingError: If source has invalid syntax or nests too deeply
        """
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e
        except ValueError as e:
            # null bytes on older interpreters
            raise ParsingError(path, f"invalid source: {e}") from e
        except (RecursionError, MemoryError) as e:
            raise ParsingError(path, f"too deeply nested: {type(e).__name__}") from e

        visitor = DependencyVisitor(SourceIndex(path, source, byte_offset), self._markers)
        try:
            visitor.visit(tree)
        except RecursionError as e:
            raise ParsingError(path, "too deeply nested: RecursionError") from e
        return visitor.result
