"""Binding value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wiregen.domain.model.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Binding:
    """Declared registration of an implementation for a contract type.

    Identity is (type, implementation, is_singleton). The location is
    excluded so identical redeclarations collapse in a set, while two
    implementations bound to the same type stay distinct.

    Attributes:
        type: Contract type name requested by consumers
        implementation: Concrete class name instantiated for the contract
        location: Declaration site (diagnostics only)
        is_singleton: One shared instance instead of one per resolve
    """

    type: str
    implementation: str
    location: SourceLocation = field(compare=False)
    is_singleton: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type:
            raise ValueError("binding type must not be empty")
        if not self.implementation:
            raise ValueError("binding implementation must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")

    @property
    def is_self_binding(self) -> bool:
        """True when the implementation is bound under its own name."""
        return self.type == self.implementation
