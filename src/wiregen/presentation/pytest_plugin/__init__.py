"""pytest plugin for wiregen.

Provides fixtures:
    wiregen_container: Empty (or pre-registered) shared container per test
    wiregen_injector: TestInjector factory for overriding Inject attributes

Configuration (pytest.ini or pyproject.toml):
    wiregen_module: Generated module whose register_dependencies() fills
        wiregen_container (default: none, container starts empty)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from wiregen.presentation.pytest_plugin.fixtures import wiregen_container, wiregen_injector

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "wiregen_container",
    "wiregen_injector",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "wiregen_module",
        "Generated module providing register_dependencies() for wiregen_container",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the wiregen marker."""
    config.addinivalue_line(
        "markers",
        "wiregen: test relies on wiregen injection",
    )
