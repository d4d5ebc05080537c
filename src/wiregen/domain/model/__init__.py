"""Domain model: value objects shared by scanner, validator and generator."""

from wiregen.domain.model.binding import Binding
from wiregen.domain.model.configuration import (
    DEFAULT_EXCLUDES,
    GeneratorConfig,
    MarkerNames,
    ScanConfig,
)
from wiregen.domain.model.decorator import Decorator
from wiregen.domain.model.enums import ViolationKind
from wiregen.domain.model.injection import InjectedDependency
from wiregen.domain.model.location import SourceLocation
from wiregen.domain.model.scan_result import ScanResult
from wiregen.domain.model.violation import Violation

__all__ = [
    "DEFAULT_EXCLUDES",
    "Binding",
    "Decorator",
    "GeneratorConfig",
    "InjectedDependency",
    "MarkerNames",
    "ScanConfig",
    "ScanResult",
    "SourceLocation",
    "Violation",
    "ViolationKind",
]
