"""Scan cache port.

Persistent per-file memo of scan results keyed by path and modification time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable
    from pathlib import Path

    from wiregen.domain.model.scan_result import ScanResult


class ScanCachePort(Protocol):
    """Contract for scan caches.

    All methods must be thread-safe. Implementations never raise on
    corrupt or missing storage: they behave as an empty cache.
    """

    def lookup(self, path: str, mtime_ns: int) -> ScanResult | None:
        """Cached result if the file did not change since it was stored.

        Args:
            path: Absolute file path
            mtime_ns: Current modification time of the file

        Returns:
            Cached result, or None on miss or stale entry
        """
        ...

    def store(self, path: str, mtime_ns: int, result: ScanResult) -> None:
        """Remember the result of a fresh parse."""
        ...

    def invalidate(self, path: str) -> None:
        """Forget one file."""
        ...

    def clear(self) -> None:
        """Forget every file."""
        ...

    def prune(self, roots: Iterable[Path], keep: Collection[str]) -> int:
        """Forget files under roots that are not in keep.

        Entries outside every root belong to other source trees and stay.

        Args:
            roots: Absolute directories that were scanned
            keep: Absolute paths of the files found under roots

        Returns:
            Number of entries removed
        """
        ...

    def flush(self) -> None:
        """Persist pending changes. No-op when nothing changed."""
        ...
