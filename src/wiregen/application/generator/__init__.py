"""Container code generator.

Bindings -> GenerationPlan (planner) -> Python source (renderer).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wiregen.application.generator.planner import (
    GenerationPlan,
    GenerationPlanner,
    ImplementationGroup,
    snake_case,
)
from wiregen.application.generator.renderer import ContainerCodeRenderer
from wiregen.infrastructure.adapters.files import atomic_write_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.injection import InjectedDependency


def generate_container_code(
    bindings: Iterable[Binding],
    imports: Sequence[str],
    injections: Iterable[InjectedDependency],
    *,
    include_assertions: bool = True,
) -> str:
    """Generate the module registering every binding.

    Singleton implementations bound to several types are constructed once
    and registered under each type. Byte-identical output for identical
    inputs, whatever their order.

    Args:
        bindings: Validated bindings
        imports: Modules (or full import statements) the module needs
        injections: Injection sites, for assert_all_injections()
        include_assertions: Emit the debug-only assert_all_injections()

    Returns:
        Python source text
    """
    plan = GenerationPlanner().build(
        bindings,
        imports,
        injections,
        include_assertions=include_assertions,
    )
    return ContainerCodeRenderer().render(plan)


def write_generated_code(path: Path, code: str) -> None:
    """Write generated source atomically, creating parent directories.

    Raises:
        OSError: If the file cannot be written
    """
    atomic_write_text(path, code)


__all__ = [
    "ContainerCodeRenderer",
    "GenerationPlan",
    "GenerationPlanner",
    "ImplementationGroup",
    "generate_container_code",
    "snake_case",
    "write_generated_code",
]
