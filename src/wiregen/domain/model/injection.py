"""Injection site value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wiregen.domain.model.location import SourceLocation


@dataclass(frozen=True, slots=True)
class InjectedDependency:
    """Attribute declared as requiring a resolved instance.

    Attributes:
        type: Requested type text, verbatim as annotated
        location: Declaration site
    """

    type: str
    location: SourceLocation

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type:
            raise ValueError("injected type must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")
