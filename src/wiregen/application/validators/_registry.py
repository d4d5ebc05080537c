"""Validator registry for dependency validators.

Central registry of all validators with the aggregate entry point.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wiregen.application.validators.duplicate_binding_validator import DuplicateBindingValidator
from wiregen.application.validators.missing_binding_validator import MissingBindingValidator
from wiregen.domain.exceptions.validation import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wiregen.domain.model.binding import Binding
    from wiregen.domain.model.injection import InjectedDependency
    from wiregen.domain.model.violation import Violation
    from wiregen.domain.ports.validator import ValidatorProtocol

logger = logging.getLogger(__name__)


def default_validators() -> tuple[ValidatorProtocol, ...]:
    """Instantiate the built-in validators.

    Order matters: violations are reported in this order.

    Returns:
        Tuple of validators
    """
    return (DuplicateBindingValidator(), MissingBindingValidator())


def collect_violations(
    bindings: Sequence[Binding],
    injections: Sequence[InjectedDependency],
    validators: Sequence[ValidatorProtocol] | None = None,
) -> tuple[Violation, ...]:
    """Run every validator and concatenate their violations.

    Args:
        bindings: Deduplicated bindings
        injections: Injection sites
        validators: Validators to run (default_validators() if None)

    Returns:
        All violations, empty if the wiring is valid
    """
    if validators is None:
        validators = default_validators()

    violations: list[Violation] = []
    for validator in validators:
        violations.extend(validator.validate(bindings, injections))

    return tuple(violations)


def validate_dependencies(
    bindings: Sequence[Binding],
    injections: Sequence[InjectedDependency],
    validators: Sequence[ValidatorProtocol] | None = None,
) -> None:
    """Validate that every injection resolves to exactly one binding.

    Not fail-fast: every problem found is part of the raised error.

    Args:
        bindings: Deduplicated bindings
        injections: Injection sites
        validators: Validators to run (default_validators() if None)

    Raises:
        ValidationError: If any duplicate or missing binding was found
    """
    violations = collect_violations(bindings, injections, validators)
    if violations:
        raise ValidationError(violations)

    logger.info(
        "Validated %d binding(s) against %d injection site(s)",
        len(bindings),
        len(injections),
    )
