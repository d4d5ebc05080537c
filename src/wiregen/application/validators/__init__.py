"""Dependency validators.

Validators cross-check bindings against injection sites:
- DuplicateBindingValidator: a type bound more than once
- MissingBindingValidator: an injected type never bound
"""

from wiregen.application.validators._base import BaseValidator
from wiregen.application.validators._registry import (
    collect_violations,
    default_validators,
    validate_dependencies,
)
from wiregen.application.validators.duplicate_binding_validator import DuplicateBindingValidator
from wiregen.application.validators.missing_binding_validator import MissingBindingValidator

__all__ = [
    # Base
    "BaseValidator",
    # Validators
    "DuplicateBindingValidator",
    "MissingBindingValidator",
    # Entry points
    "collect_violations",
    "default_validators",
    "validate_dependencies",
]
