"""Dependency validation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wiregen.domain.exceptions.base import WiregenError
from wiregen.domain.model.enums import ViolationKind

if TYPE_CHECKING:
    from wiregen.domain.model.violation import Violation

_SECTION_HEADERS = {
    ViolationKind.DUPLICATE_BINDING: "Duplicate bindings found for the following types:",
    ViolationKind.MISSING_BINDING: "Missing bindings for the following dependencies:",
}


class ValidationError(WiregenError):
    """Bindings and injection sites do not form a valid wiring.

    Aggregates every problem found in one pass. Generation stops and
    no output file is written.

    Attributes:
        violations: All found violations, duplicates first
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        if not violations:
            raise ValueError("ValidationError requires at least one violation")

        self.violations = violations

        msg_parts = [f"Found {len(violations)} dependency problem(s):"]
        for kind, header in _SECTION_HEADERS.items():
            section = [v for v in violations if v.kind is kind]
            if section:
                msg_parts.append(header)
                msg_parts.extend(str(v) for v in section)

        super().__init__("\n".join(msg_parts))

    def of_kind(self, kind: ViolationKind) -> tuple[Violation, ...]:
        """Violations of one category, in reported order."""
        return tuple(v for v in self.violations if v.kind is kind)
