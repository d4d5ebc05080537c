"""Duplicate binding validator.

A contract type must map to exactly one binding, whatever the
implementations or lifetimes of the conflicting declarations.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from wiregen.application.validators._base import BaseValidator
from wiregen.domain.model.enums import ViolationKind
from wiregen.domain.model.violation import Violation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.injection import InjectedDependency


class DuplicateBindingValidator(BaseValidator):
    """Reports every type bound more than once.

    One violation per type, listing every conflicting implementation with
    its location. Violations are sorted by type name, bindings inside a
    violation by location.
    """

    kind = ViolationKind.DUPLICATE_BINDING

    def validate(
        self,
        bindings: Sequence[Binding],
        injections: Sequence[InjectedDependency],
    ) -> tuple[Violation, ...]:
        """Group bindings by type and report groups with several members.

        Args:
            bindings: Deduplicated bindings
            injections: Unused

        Returns:
            Tuple of violations, one per duplicated type
        """
        by_type: dict[str, list[Binding]] = defaultdict(list)
        # Identical redeclarations are one binding
        for binding in dict.fromkeys(bindings):
            by_type[binding.type].append(binding)

        violations: list[Violation] = []
        for type_name in sorted(by_type):
            group = by_type[type_name]
            if len(group) < 2:
                continue
            group.sort(
                key=lambda b: (b.location.file, b.location.line, b.location.column, b.implementation)
            )
            violations.append(
                Violation(
                    kind=self.kind,
                    type_name=type_name,
                    locations=tuple(b.location for b in group),
                    implementations=tuple(b.implementation for b in group),
                )
            )

        return tuple(violations)
