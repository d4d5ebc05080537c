"""Decorator value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wiregen.domain.model.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Decorator:
    """Decorator applied to a class declaration.

    Attributes:
        name: Full decorator name (e.g., "bind", "wiregen.bind")
        arguments: Positional arguments, source text as written
        keywords: Keyword arguments as "name=value" strings
        called: True for ``@name(...)``, False for bare ``@name``
        location: Source location of the decorator expression
    """

    name: str
    arguments: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    called: bool = False
    location: SourceLocation | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("decorator name must not be empty")

    @property
    def short_name(self) -> str:
        """Last dotted component ("wiregen.bind" -> "bind")."""
        return self.name.rpartition(".")[2]
