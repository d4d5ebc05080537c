"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
import re
from typing import TYPE_CHECKING

from wiregen.domain.model.location import SourceLocation

if TYPE_CHECKING:
    from pathlib import Path

# Line terminators recognised by the tokenizer (not str.splitlines)
_NEWLINE = re.compile(rb"\r\n|\r|\n")


class SourceIndex:
    """Source text of one file with byte-accurate position lookup.

    AST column offsets are UTF-8 byte offsets, so line starts are
    computed on the encoded source.

    Attributes:
        path: Source file path
        source: Decoded source text
    """

    __slots__ = ("_line_starts", "path", "source")

    def __init__(self, path: Path, source: str, byte_offset: int = 0) -> None:
        """Index source text.

        Args:
            path: Source file path (used in locations)
            source: Decoded source text
            byte_offset: File bytes preceding source (a BOM stripped by decoding)

        Raises:
            TypeError: If path is None (FAIL-FIRST)
            ValueError: If byte_offset is negative (FAIL-FIRST)
        """
        if path is None:
            raise TypeError("path must not be None")
        if byte_offset < 0:
            raise ValueError(f"byte_offset must be >= 0, got {byte_offset}")

        self.path = path
        self.source = source
        encoded = source.encode("utf-8")
        self._line_starts: tuple[int, ...] = (
            byte_offset,
            *(byte_offset + match.end() for match in _NEWLINE.finditer(encoded)),
        )

    def location(self, node: ast.stmt | ast.expr) -> SourceLocation:
        """Create SourceLocation pointing at the start of node.

        Args:
            node: AST node with position info

        Returns:
            1-based line and column, 0-based byte offset

        Raises:
            ValueError: If node has no line info (FAIL-FIRST)
        """
        lineno = getattr(node, "lineno", None)
        if lineno is None:
            raise ValueError(f"{type(node).__name__} node has no line info")

        line_start = self._line_starts[lineno - 1] if lineno <= len(self._line_starts) else 0
        return SourceLocation(
            file=str(self.path),
            line=lineno,
            column=node.col_offset + 1,
            offset=line_start + node.col_offset,
        )

    def segment(self, node: ast.expr) -> str:
        """Source text of node exactly as written.

        Falls back to ast.unparse when positions are unavailable.
        """
        text = ast.get_source_segment(self.source, node)
        if text is None:
            return ast.unparse(node)
        return text


def dotted_name(node: ast.expr) -> str | None:
    """Name of a Name/Attribute chain ("a.b.c"), None for anything else."""
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            base = dotted_name(value)
            return f"{base}.{attr}" if base is not None else None
        case _:
            return None


def short_name(name: str) -> str:
    """Last dotted component of a name."""
    return name.rpartition(".")[2]


def is_marker_call(node: ast.expr | None, marker: str) -> bool:
    """Check if node is a call to marker (``Inject()``, ``wiregen.Inject(T)``)."""
    match node:
        case ast.Call(func=func):
            name = dotted_name(func)
            return name is not None and short_name(name) == marker
        case _:
            return False
