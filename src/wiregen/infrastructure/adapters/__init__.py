"""Infrastructure adapters for external interfaces."""

from wiregen.infrastructure.adapters.ast_parser import ASTFileParser
from wiregen.infrastructure.adapters.files import atomic_write_text
from wiregen.infrastructure.adapters.scan_cache import (
    JsonScanCache,
    NullScanCache,
    default_cache_file,
)

__all__ = [
    "ASTFileParser",
    "atomic_write_text",
    "JsonScanCache",
    "NullScanCache",
    "default_cache_file",
]
