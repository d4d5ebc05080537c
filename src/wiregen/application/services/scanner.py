"""Scanner service: source directories -> bindings and injection sites.

Walks directories, reuses cached results of unchanged files and parses the
rest in parallel. A file that fails to parse is reported and skipped.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING

from wiregen.domain.exceptions.parsing import ParsingError
from wiregen.domain.model.configuration import ScanConfig
from wiregen.domain.model.scan_result import ScanResult
from wiregen.infrastructure.adapters.ast_parser import ASTFileParser
from wiregen.infrastructure.adapters.scan_cache import NullScanCache

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wiregen.domain.ports.file_parser import FileParserPort
    from wiregen.domain.ports.scan_cache import ScanCachePort

logger = logging.getLogger(__name__)


def find_source_files(
    directories: Iterable[Path],
    *,
    extension: str = ".py",
    exclude: frozenset[str] = frozenset(),
) -> list[Path]:
    """Find source files under directories, in discovery order.

    Directories are walked in the order given, entries of each directory
    in sorted order. A file reachable from two directories is listed once.

    Args:
        directories: Roots to walk recursively
        extension: File suffix to keep
        exclude: Directory names to skip

    Returns:
        Absolute file paths
    """
    result: list[Path] = []
    seen: set[Path] = set()

    for directory in directories:
        root = Path(directory).resolve()
        if not root.is_dir():
            logger.warning("Source directory %s does not exist, skipped", root)
            continue
        for path in _walk(root, extension, exclude):
            if path not in seen:
                seen.add(path)
                result.append(path)

    return result


def _walk(root: Path, extension: str, exclude: frozenset[str]) -> list[Path]:
    result: list[Path] = []
    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        logger.warning("Cannot list %s: %s", root, e)
        return result

    for item in entries:
        if item.is_dir():
            if item.name not in exclude:
                result.extend(_walk(item, extension, exclude))
        elif item.is_file() and item.suffix == extension:
            result.append(item)

    return result


def scan_directories(
    directories: Iterable[Path],
    *,
    config: ScanConfig | None = None,
    cache: ScanCachePort | None = None,
    parser: FileParserPort | None = None,
) -> ScanResult:
    """Scan directories for bindings and injection sites.

    Unchanged files are served from the cache, the others are parsed on
    a thread pool. Blocks until every file is done. Cache entries of
    files no longer found under directories are dropped, then the cache
    is flushed once.

    Args:
        directories: Directories to scan, in order
        config: Scanner settings (defaults if None)
        cache: Scan cache (disabled if None)
        parser: File parser (ASTFileParser with config markers if None)

    Returns:
        Deduplicated bindings and injections in discovery order
    """
    config = config or ScanConfig()
    cache = cache if cache is not None else NullScanCache()
    parser = parser if parser is not None else ASTFileParser(config.markers)

    roots = [Path(directory).resolve() for directory in directories]
    files = find_source_files(roots, extension=config.extension, exclude=config.exclude)

    # One slot per file keeps discovery order whatever the completion order
    slots: list[ScanResult | None] = [None] * len(files)
    lock = threading.Lock()
    pending: list[tuple[int, Path, int]] = []

    for index, path in enumerate(files):
        try:
            mtime_ns = path.stat().st_mtime_ns
        except OSError as e:
            logger.warning("Cannot stat %s, skipped: %s", path, e)
            continue
        cached = cache.lookup(str(path), mtime_ns)
        if cached is not None:
            slots[index] = cached
        else:
            pending.append((index, path, mtime_ns))

    def parse_one(index: int, path: Path, mtime_ns: int) -> None:
        try:
            result = parser.parse_file(path)
        except ParsingError as e:
            logger.warning("%s", e)
            cache.invalidate(str(path))
            return
        cache.store(str(path), mtime_ns, result)
        with lock:
            slots[index] = result

    if pending:
        with ThreadPoolExecutor(
            max_workers=min(config.max_workers, len(pending)),
            thread_name_prefix="wiregen-scan",
        ) as executor:
            futures = [executor.submit(parse_one, *task) for task in pending]
        # Executor exit joined every task; surface unexpected failures
        for future in futures:
            future.result()

    # Files under the roots that were not found this time
    pruned = cache.prune(roots, {str(path) for path in files})
    if pruned:
        logger.debug("Dropped %d stale scan cache entries", pruned)
    cache.flush()

    logger.info(
        "Scanned %d file(s): %d from cache, %d parsed",
        len(files),
        len(files) - len(pending),
        len(pending),
    )

    return ScanResult.merge(slot for slot in slots if slot is not None)
