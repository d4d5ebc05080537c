"""Domain enumerations."""

from enum import Enum


class ViolationKind(Enum):
    """Category of a dependency validation problem."""

    DUPLICATE_BINDING = "duplicate_binding"  # one type, several bindings
    MISSING_BINDING = "missing_binding"  # injected type never bound
