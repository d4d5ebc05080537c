"""Scanner and generator configuration.

Immutable DTOs with FAIL-FIRST validation, built by the CLI or by callers
embedding the pipeline.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        "venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)


def _default_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


@dataclass(frozen=True, slots=True)
class MarkerNames:
    """Names of the declarative markers recognised by the scanner.

    Matched against the last dotted component of a decorator or call,
    so ``@bind``, ``@wiregen.bind`` and ``@markers.bind`` are equivalent.

    Attributes:
        bind: Class decorator declaring bindings
        singleton: Class decorator selecting singleton lifetime
        inject: Descriptor marking an injection site
    """

    bind: str = "bind"
    singleton: str = "singleton"
    inject: str = "Inject"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in (self.bind, self.singleton, self.inject):
            if not name.isidentifier():
                raise ValueError(f"marker name must be an identifier, got {name!r}")
        if len({self.bind, self.singleton, self.inject}) != 3:
            raise ValueError("marker names must be distinct")

    def fingerprint(self) -> str:
        """Stable text identifying this marker set (cache compatibility)."""
        return f"{self.bind}|{self.singleton}|{self.inject}"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Source scanner settings.

    Attributes:
        extension: Source file suffix to scan
        exclude: Directory names never descended into
        max_workers: Parser thread pool size
        markers: Marker names to recognise
    """

    extension: str = ".py"
    exclude: frozenset[str] = DEFAULT_EXCLUDES
    max_workers: int = field(default_factory=_default_workers)
    markers: MarkerNames = field(default_factory=MarkerNames)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.extension.startswith("."):
            raise ValueError(f"extension must start with '.', got {self.extension!r}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Full generation run settings.

    Attributes:
        source_dirs: Directories to scan, in order
        output: Destination of the generated module
        imports: Modules star-imported by the generated module, in order
        scan: Scanner settings
        use_cache: Reuse results of unchanged files between runs
        cache_file: Cache location, None = default location
        include_assertions: Emit the debug-only assert_all_injections()
    """

    source_dirs: tuple[Path, ...]
    output: Path
    imports: tuple[str, ...] = ()
    scan: ScanConfig = field(default_factory=ScanConfig)
    use_cache: bool = True
    cache_file: Path | None = None
    include_assertions: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source_dirs:
            raise ValueError("source_dirs must not be empty")
        if self.output is None:
            raise TypeError("output must not be None")
        for entry in self.imports:
            if not entry or not entry.strip():
                raise ValueError("imports must not contain empty entries")
