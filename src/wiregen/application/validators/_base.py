"""Base validator class for dependency validators.

Provides default implementation of ValidatorProtocol.
Concrete validators inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.enums import ViolationKind
    from wiregen.domain.model.injection import InjectedDependency
    from wiregen.domain.model.violation import Violation


class BaseValidator(ABC):
    """Base class for validators implementing ValidatorProtocol.

    Concrete validators must:
    1. Set `kind` class attribute
    2. Implement `validate()` method

    Example:
        class SelfBindingValidator(BaseValidator):
            kind = ViolationKind.MISSING_BINDING

            def validate(self, bindings, injections) -> tuple[Violation, ...]:
                # ... validation logic ...
                return tuple(violations)
    """

    kind: ViolationKind
    """Category of violations produced."""

    @abstractmethod
    def validate(
        self,
        bindings: Sequence[Binding],
        injections: Sequence[InjectedDependency],
    ) -> tuple[Violation, ...]:
        """Check bindings and injections.

        Args:
            bindings: Deduplicated bindings
            injections: Injection sites in discovery order

        Returns:
            Tuple of violations found (empty if valid)
        """
