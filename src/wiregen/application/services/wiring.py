"""Generation pipeline: scan -> validate -> generate -> write."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wiregen.application.generator import generate_container_code, write_generated_code
from wiregen.application.services.scanner import scan_directories
from wiregen.application.validators import validate_dependencies
from wiregen.infrastructure.adapters.scan_cache import JsonScanCache, NullScanCache

if TYPE_CHECKING:
    from pathlib import Path

    from wiregen.domain.model.configuration import GeneratorConfig
    from wiregen.domain.model.scan_result import ScanResult
    from wiregen.domain.ports.scan_cache import ScanCachePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationReport:
    """Outcome of a successful generation run.

    Attributes:
        output: Path the module was written to
        scan: Bindings and injection sites found
        code: Generated source text
        duration_ms: Wall time of the run
    """

    output: Path
    scan: ScanResult
    code: str
    duration_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {self.duration_ms}")

    @property
    def binding_count(self) -> int:
        return len(self.scan.bindings)

    @property
    def injection_count(self) -> int:
        return len(self.scan.injections)


def open_cache(config: GeneratorConfig) -> ScanCachePort:
    """Scan cache selected by config (NullScanCache when disabled)."""
    if not config.use_cache:
        return NullScanCache()
    return JsonScanCache(config.cache_file, config.scan.markers)


def generate_wiring(
    config: GeneratorConfig,
    *,
    cache: ScanCachePort | None = None,
) -> GenerationReport:
    """Run the whole pipeline for one configuration.

    The output file is written only if validation passes.

    Args:
        config: Run settings
        cache: Scan cache override (open_cache(config) if None)

    Returns:
        Report of the written module

    Raises:
        ValidationError: If the wiring is invalid (nothing written)
        OSError: If the output cannot be written
    """
    start = time.perf_counter()

    scan = scan_directories(
        config.source_dirs,
        config=config.scan,
        cache=cache if cache is not None else open_cache(config),
    )
    validate_dependencies(scan.bindings, scan.injections)

    code = generate_container_code(
        scan.bindings,
        config.imports,
        scan.injections,
        include_assertions=config.include_assertions,
    )
    write_generated_code(config.output, code)

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Wrote %s: %d binding(s), %d injection site(s) in %.1f ms",
        config.output,
        len(scan.bindings),
        len(scan.injections),
        duration_ms,
    )

    return GenerationReport(output=config.output, scan=scan, code=code, duration_ms=duration_ms)
