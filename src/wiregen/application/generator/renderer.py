"""Renders a GenerationPlan into Python source text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wiregen import __version__
from wiregen.application.generator.templates import (
    ASSERTIONS_TEMPLATE,
    FIXED_IMPORT,
    MODULE_TEMPLATE,
    REGISTER_FUNCTION_TEMPLATE,
    RESOLVE_TEMPLATE,
    SHARED_COMMENT_TEMPLATE,
    SHARED_INSTANCE_TEMPLATE,
    SHARED_REGISTRATION_TEMPLATE,
    SINGLETON_REGISTRATION_TEMPLATE,
    STAR_IMPORT_TEMPLATE,
    TRANSIENT_REGISTRATION_TEMPLATE,
)

if TYPE_CHECKING:
    from wiregen.application.generator.planner import GenerationPlan, ImplementationGroup

_INDENT = " " * 4
logger = logging.getLogger(__name__)


class ContainerCodeRenderer:
    """Turns a plan into the registration module source.

    Pure text emission: no I/O, output depends only on the plan.
    """

    def render(self, plan: GenerationPlan) -> str:
        """Render the whole module.

        Args:
            plan: Generation plan

        Returns:
            Module source ending with a single newline
        """
        logger.info(
            "Container codegen: imports=%d groups=%d bindings=%d shared_instances=%d "
            "injected_types=%d assertions=%s",
            len(plan.imports),
            len(plan.groups),
            plan.binding_count,
            plan.shared_instance_count,
            len(plan.injected_types),
            plan.include_assertions,
        )

        register_block = self._render_register_function(plan)
        if plan.include_assertions:
            register_block += "\n\n\n" + self._render_assertions(plan)

        module = MODULE_TEMPLATE.format(
            version=__version__,
            binding_count=plan.binding_count,
            shared_count=plan.shared_instance_count,
            imports_block=self._render_imports(plan),
            register_block=register_block,
        )
        return module + "\n"

    def _render_imports(self, plan: GenerationPlan) -> str:
        lines = [self._import_line(entry) for entry in plan.imports]
        lines.append(FIXED_IMPORT)
        return "\n".join(lines)

    @staticmethod
    def _import_line(entry: str) -> str:
        entry = entry.strip()
        # Full statements pass through untouched
        if entry.startswith(("import ", "from ")):
            return entry
        return STAR_IMPORT_TEMPLATE.format(module=entry)

    def _render_register_function(self, plan: GenerationPlan) -> str:
        lines: list[str] = []
        for group in plan.groups:
            lines.extend(self._render_group(group))
        return REGISTER_FUNCTION_TEMPLATE.format(body=self._indent(lines, depth=1)).rstrip()

    def _render_group(self, group: ImplementationGroup) -> list[str]:
        if group.shared_name is not None:
            lines = [
                SHARED_COMMENT_TEMPLATE.format(implementation=group.implementation),
                SHARED_INSTANCE_TEMPLATE.format(
                    name=group.shared_name,
                    implementation=group.implementation,
                ),
            ]
            lines.extend(
                SHARED_REGISTRATION_TEMPLATE.format(type=binding.type, name=group.shared_name)
                for binding in group.bindings
            )
            return lines

        lines = []
        for binding in group.bindings:
            template = (
                SINGLETON_REGISTRATION_TEMPLATE
                if binding.is_singleton
                else TRANSIENT_REGISTRATION_TEMPLATE
            )
            lines.append(template.format(type=binding.type, implementation=binding.implementation))
        return lines

    def _render_assertions(self, plan: GenerationPlan) -> str:
        lines = [RESOLVE_TEMPLATE.format(type=type_name) for type_name in plan.injected_types]
        return ASSERTIONS_TEMPLATE.format(body=self._indent(lines, depth=2)).rstrip()

    @staticmethod
    def _indent(lines: list[str], *, depth: int) -> str:
        prefix = _INDENT * depth
        return "\n".join(prefix + line for line in lines)
