"""Validator protocol for dependency validators.

Validators cross-check bindings against injection sites.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.enums import ViolationKind
    from wiregen.domain.model.injection import InjectedDependency
    from wiregen.domain.model.violation import Violation


class ValidatorProtocol(Protocol):
    """Contract for validators.

    Validators are stateless and never raise for problems they detect:
    they return them, so every problem is reported in one pass.
    """

    kind: ViolationKind
    """Category of violations produced."""

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
            Tuple of violations found (empty if valid), deterministically ordered
        """
        ...
