"""wiregen - compile-time dependency injection for Python.

Declare bindings with @bind/@singleton and injection sites with Inject;
the wiregen CLI scans the sources, validates the wiring and generates the
register_dependencies() module that fills AppContainer.
"""

__version__ = "0.1.0"

from wiregen.container import AppContainer
from wiregen.domain.exceptions import (
    ConfigurationError,
    InjectableNotFoundError,
    UnregisteredTypeError,
    ValidationError,
    WiregenError,
)
from wiregen.inject import Inject, LazyCell
from wiregen.markers import bind, singleton
from wiregen.testing import TestInjector

__all__ = [
    "AppContainer",
    "ConfigurationError",
    "Inject",
    "InjectableNotFoundError",
    "LazyCell",
    "TestInjector",
    "UnregisteredTypeError",
    "ValidationError",
    "WiregenError",
    "__version__",
    "bind",
    "singleton",
]
