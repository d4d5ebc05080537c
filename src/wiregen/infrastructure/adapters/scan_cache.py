"""Persistent scan cache adapters.

JsonScanCache keeps one JSON document mapping absolute file paths to the
modification time observed and the declarations extracted at that time.
NullScanCache is the disabled variant.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wiregen.domain.model.binding import Binding
from wiregen.domain.model.configuration import MarkerNames
from wiregen.domain.model.injection import InjectedDependency
from wiregen.domain.model.location import SourceLocation
from wiregen.domain.model.scan_result import ScanResult
from wiregen.domain.ports.scan_cache import ScanCachePort
from wiregen.infrastructure.adapters.files import atomic_write_text

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping

logger = logging.getLogger(__name__)

CACHE_FORMAT_VERSION = 1
CACHE_DIR_ENV = "WIREGEN_CACHE_DIR"
CACHE_FILE_NAME = "scan-cache.json"


def default_cache_file() -> Path:
    """Well-known cache location.

    ``$WIREGEN_CACHE_DIR`` if set, else ``$XDG_CACHE_HOME/wiregen``,
    else ``~/.cache/wiregen``.
    """
    override = os.environ.get(CACHE_DIR_ENV)
    if override:
        return Path(override) / CACHE_FILE_NAME
    xdg = os.environ.get("XDG_CACHE_HOME")
    base = Path(xdg) if xdg else Path.home() / ".cache"
    return base / "wiregen" / CACHE_FILE_NAME


class NullScanCache(ScanCachePort):
    """Cache that never hits and never persists."""

    def lookup(self, path: str, mtime_ns: int) -> ScanResult | None:
        return None

    def store(self, path: str, mtime_ns: int, result: ScanResult) -> None:
        pass

    def invalidate(self, path: str) -> None:
        pass

    def clear(self) -> None:
        pass

    def prune(self, roots: Iterable[Path], keep: Collection[str]) -> int:
        return 0

    def flush(self) -> None:
        pass


class JsonScanCache(ScanCachePort):
    """File-backed scan cache.

    Loaded eagerly on construction, written on flush() only if changed.
    A missing, unreadable, malformed or incompatible file (other format
    version or marker names) is treated as an empty cache.

    Thread-safe: one lock guards the in-memory mapping.

    Attributes:
        cache_file: Location of the JSON document
    """

    def __init__(self, cache_file: Path | None = None, markers: MarkerNames | None = None) -> None:
        """Open cache.

        Args:
            cache_file: JSON file location (default_cache_file() if None)
            markers: Marker names the cached results were extracted with
        """
        self.cache_file = cache_file if cache_file is not None else default_cache_file()
        self._fingerprint = (markers or MarkerNames()).fingerprint()
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[int, ScanResult]] = self._load()
        self._dirty = False

    def lookup(self, path: str, mtime_ns: int) -> ScanResult | None:
        with self._lock:
            entry = self._entries.get(path)
        if entry is None:
            return None
        cached_mtime, result = entry
        # Hit unless the file is newer than what we saw
        if mtime_ns > cached_mtime:
            return None
        return result

    def store(self, path: str, mtime_ns: int, result: ScanResult) -> None:
        with self._lock:
            self._entries[path] = (mtime_ns, result)
            self._dirty = True

    def invalidate(self, path: str) -> None:
        with self._lock:
            if self._entries.pop(path, None) is not None:
                self._dirty = True

    def clear(self) -> None:
        with self._lock:
            if self._entries:
                self._dirty = True
            self._entries.clear()

    def prune(self, roots: Iterable[Path], keep: Collection[str]) -> int:
        root_list = tuple(roots)
        with self._lock:
            stale = [
                path
                for path in self._entries
                if path not in keep and any(Path(path).is_relative_to(r) for r in root_list)
            ]
            for path in stale:
                del self._entries[path]
            if stale:
                self._dirty = True
        return len(stale)

    def flush(self) -> None:
        with self._lock:
            if not self._dirty:
                return
            document = {
                "version": CACHE_FORMAT_VERSION,
                "markers": self._fingerprint,
                "files": {
                    path: _entry_to_json(mtime, result)
                    for path, (mtime, result) in sorted(self._entries.items())
                },
            }
            try:
                atomic_write_text(self.cache_file, json.dumps(document, indent=1))
            except OSError as e:
                # Cache is an accelerator only: next run rescans
                logger.warning("Failed to save scan cache %s: %s", self.cache_file, e)
                return
            self._dirty = False

    @property
    def size(self) -> int:
        """Number of cached files."""
        with self._lock:
            return len(self._entries)

    def _load(self) -> dict[str, tuple[int, ScanResult]]:
        try:
            document = json.loads(self.cache_file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.debug("Ignoring unreadable scan cache %s: %s", self.cache_file, e)
            return {}

        try:
            if document["version"] != CACHE_FORMAT_VERSION:
                return {}
            if document["markers"] != self._fingerprint:
                return {}
            return {
                str(path): _entry_from_json(entry) for path, entry in document["files"].items()
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.debug("Ignoring malformed scan cache %s: %s", self.cache_file, e)
            return {}


def _location_to_json(location: SourceLocation) -> dict[str, Any]:
    return {
        "file": location.file,
        "line": location.line,
        "column": location.column,
        "offset": location.offset,
    }


def _location_from_json(data: Mapping[str, Any]) -> SourceLocation:
    return SourceLocation(
        file=str(data["file"]),
        line=int(data["line"]),
        column=int(data["column"]),
        offset=int(data["offset"]),
    )


def _entry_to_json(mtime_ns: int, result: ScanResult) -> dict[str, Any]:
    return {
        "mtime_ns": mtime_ns,
        "bindings": [
            {
                "type": b.type,
                "implementation": b.implementation,
                "is_singleton": b.is_singleton,
                "location": _location_to_json(b.location),
            }
            for b in result.bindings
        ],
        "injections": [
            {"type": i.type, "location": _location_to_json(i.location)} for i in result.injections
        ],
    }


def _entry_from_json(data: Mapping[str, Any]) -> tuple[int, ScanResult]:
    bindings = tuple(
        Binding(
            type=str(b["type"]),
            implementation=str(b["implementation"]),
            location=_location_from_json(b["location"]),
            is_singleton=bool(b["is_singleton"]),
        )
        for b in data["bindings"]
    )
    injections = tuple(
        InjectedDependency(type=str(i["type"]), location=_location_from_json(i["location"]))
        for i in data["injections"]
    )
    return int(data["mtime_ns"]), ScanResult(bindings=bindings, injections=injections)
