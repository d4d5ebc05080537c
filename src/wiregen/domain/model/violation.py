"""Validation violation entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wiregen.domain.model.enums import ViolationKind

if TYPE_CHECKING:
    from wiregen.domain.model.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Violation:
    """Single dependency validation problem.

    Attributes:
        kind: Problem category
        type_name: Contract type the problem is about
        locations: Every source location involved
        implementations: Conflicting implementations, parallel to locations
            (duplicate bindings only)
    """

    kind: ViolationKind
    type_name: str
    locations: tuple[SourceLocation, ...]
    implementations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_name:
            raise ValueError("type_name must not be empty")
        if not self.locations:
            raise ValueError("violation requires at least one location")
        if self.kind is ViolationKind.DUPLICATE_BINDING:
            if len(self.implementations) != len(self.locations):
                raise ValueError("implementations must be parallel to locations")
            if len(self.locations) < 2:
                raise ValueError("duplicate binding requires at least two bindings")

    @property
    def message(self) -> str:
        """One-line human readable summary."""
        if self.kind is ViolationKind.DUPLICATE_BINDING:
            return f"{self.type_name} is bound with multiple implementations"
        return f"{self.type_name} has no binding"

    def __str__(self) -> str:
        """Format violation with every location on its own line."""
        if self.kind is ViolationKind.DUPLICATE_BINDING:
            lines = [f"- {self.message}:"]
            lines.extend(
                f"  - {impl} at {loc}"
                for impl, loc in zip(self.implementations, self.locations, strict=True)
            )
            return "\n".join(lines)
        used_at = ", ".join(str(loc) for loc in self.locations)
        return f"- {self.type_name} (used at {used_at})"
