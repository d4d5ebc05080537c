"""Generation planner: bindings and injections -> ordered registration plan.

Everything the renderer emits is decided here, in a fully sorted order,
so identical inputs always produce identical output.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.injection import InjectedDependency

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_IDENTIFIER = re.compile(r"\W+")


def snake_case(name: str) -> str:
    """Identifier-safe snake_case of a class name ("HTTPClientImpl" -> "http_client_impl")."""
    words = _CAMEL_BOUNDARY.sub("_", name)
    return _NON_IDENTIFIER.sub("_", words).strip("_").lower() or "instance"


@dataclass(frozen=True, slots=True)
class ImplementationGroup:
    """Bindings sharing one implementation.

    Attributes:
        implementation: Concrete class name
        bindings: Bindings of the group, sorted by type
        shared_name: Variable holding the shared instance, None when
            every binding registers its own factory
    """

    implementation: str
    bindings: tuple[Binding, ...]
    shared_name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.bindings:
            raise ValueError("implementation group must not be empty")
        if any(b.implementation != self.implementation for b in self.bindings):
            raise ValueError(f"all bindings must implement {self.implementation}")
        if self.shared_name is not None and not self.can_share_instance:
            raise ValueError("shared_name requires an all-singleton group of two or more")

    @property
    def can_share_instance(self) -> bool:
        """One implementation satisfying several singleton contracts.

        Mixed lifetimes never share: each singleton binding then keeps
        its own instance, each transient binding its own factory.
        """
        return len(self.bindings) > 1 and all(b.is_singleton for b in self.bindings)


@dataclass(frozen=True, slots=True)
class GenerationPlan:
    """Everything needed to render the registration module.

    Attributes:
        imports: Import entries, in the order given
        groups: Implementation groups, sorted by implementation
        injected_types: Distinct injected types, sorted
        include_assertions: Render assert_all_injections()
    """

    imports: tuple[str, ...]
    groups: tuple[ImplementationGroup, ...]
    injected_types: tuple[str, ...]
    include_assertions: bool = True

    @property
    def binding_count(self) -> int:
        """Registrations emitted."""
        return sum(len(g.bindings) for g in self.groups)

    @property
    def shared_instance_count(self) -> int:
        """Shared singleton instances constructed."""
        return sum(1 for g in self.groups if g.shared_name is not None)


class GenerationPlanner:
    """Builds GenerationPlan. Stateless."""

    def build(
        self,
        bindings: Iterable[Binding],
        imports: Sequence[str],
        injections: Iterable[InjectedDependency],
        *,
        include_assertions: bool = True,
    ) -> GenerationPlan:
        """Group bindings by implementation and order everything.

        Args:
            bindings: Validated bindings (any order)
            imports: Import entries, kept in the order given
            injections: Injection sites (any order)
            include_assertions: Render assert_all_injections()

        Returns:
            Deterministic generation plan
        """
        by_implementation: dict[str, list[Binding]] = defaultdict(list)
        for binding in dict.fromkeys(bindings):
            by_implementation[binding.implementation].append(binding)

        used_names: set[str] = set()
        groups: list[ImplementationGroup] = []
        for implementation in sorted(by_implementation):
            members = tuple(
                sorted(by_implementation[implementation], key=lambda b: (b.type, b.is_singleton))
            )
            group = ImplementationGroup(implementation=implementation, bindings=members)
            if group.can_share_instance:
                group = ImplementationGroup(
                    implementation=implementation,
                    bindings=members,
                    shared_name=self._unique_name(f"shared_{snake_case(implementation)}", used_names),
                )
            groups.append(group)

        return GenerationPlan(
            imports=tuple(imports),
            groups=tuple(groups),
            injected_types=tuple(sorted({i.type for i in injections})),
            include_assertions=include_assertions,
        )

    @staticmethod
    def _unique_name(base: str, used: set[str]) -> str:
        name = base
        suffix = 2
        while name in used:
            name = f"{base}_{suffix}"
            suffix += 1
        used.add(name)
        return name
