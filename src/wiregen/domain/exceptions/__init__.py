"""Domain exceptions."""

from wiregen.domain.exceptions.base import WiregenError
from wiregen.domain.exceptions.parsing import ParsingError
from wiregen.domain.exceptions.resolution import (
    ConfigurationError,
    InjectableNotFoundError,
    UnregisteredTypeError,
)
from wiregen.domain.exceptions.validation import ValidationError

__all__ = [
    "ConfigurationError",
    "InjectableNotFoundError",
    "ParsingError",
    "UnregisteredTypeError",
    "ValidationError",
    "WiregenError",
]
