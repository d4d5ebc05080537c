"""Scan result value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.injection import InjectedDependency


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Bindings and injection sites extracted from one file or a whole tree.

    Attributes:
        bindings: Bindings in discovery order
        injections: Injection sites in discovery order
    """

    bindings: tuple[Binding, ...] = ()
    injections: tuple[InjectedDependency, ...] = ()

    @classmethod
    def empty(cls) -> Self:
        """Result without bindings or injections."""
        return cls()

    @classmethod
    def merge(cls, results: Iterable[ScanResult]) -> Self:
        """Concatenate results in order and deduplicate bindings.

        Bindings keep the first occurrence of each identity, injections
        are kept as they are.
        """
        bindings: dict[Binding, None] = {}
        injections: list[InjectedDependency] = []
        for result in results:
            bindings.update(dict.fromkeys(result.bindings))
            injections.extend(result.injections)
        return cls(bindings=tuple(bindings), injections=tuple(injections))

    @property
    def bound_types(self) -> frozenset[str]:
        """Distinct contract type names."""
        return frozenset(b.type for b in self.bindings)

    @property
    def is_empty(self) -> bool:
        """No bindings and no injections."""
        return not self.bindings and not self.injections
