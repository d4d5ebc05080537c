"""Missing binding validator.

Every injected type must be among the bound types (string identity).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wiregen.application.validators._base import BaseValidator
from wiregen.domain.model.enums import ViolationKind
from wiregen.domain.model.violation import Violation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.injection import InjectedDependency


class MissingBindingValidator(BaseValidator):
    """Reports every injection site whose type has no binding.

    One violation per injection site, sorted by type name then location.
    """

    kind = ViolationKind.MISSING_BINDING

    def validate(
        self,
        bindings: Sequence[Binding],
        injections: Sequence[InjectedDependency],
    ) -> tuple[Violation, ...]:
        """Check each injection against the set of bound types.

        Args:
            bindings: Deduplicated bindings
            injections: Injection sites in discovery order

        Returns:
            Tuple of violations, one per unresolvable injection site
        """
        bound_types = frozenset(b.type for b in bindings)

        missing = [i for i in injections if i.type not in bound_types]
        missing.sort(key=lambda i: (i.type, i.location.file, i.location.line, i.location.column))

        return tuple(
            Violation(kind=self.kind, type_name=i.type, locations=(i.location,)) for i in missing
        )
