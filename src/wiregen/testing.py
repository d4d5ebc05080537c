"""Test overrides for injected attributes.

    sut = CheckoutService()
    TestInjector(sut).inject(FakeGateway(), as_type=PaymentGateway)

Overrides go through the slot registry Inject keeps on each class, so only
attributes declared with Inject can be replaced.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from wiregen.domain.exceptions.resolution import InjectableNotFoundError, describe_key
from wiregen.inject import SLOTS_ATTRIBUTE, Inject

if TYPE_CHECKING:
    from wiregen.inject import LazyCell

logger = logging.getLogger(__name__)


def injection_descriptors(cls: type) -> dict[str, Inject[Any]]:
    """Inject attributes visible on cls, base classes included.

    An attribute redefined by a subclass without Inject is not listed.
    """
    result: dict[str, Inject[Any]] = {}
    for klass in reversed(cls.__mro__):
        for name, descriptor in klass.__dict__.get(SLOTS_ATTRIBUTE, {}).items():
            result[name] = descriptor

    return {name: d for name, d in result.items() if _lookup_static(cls, name) is d}


def injection_slots(obj: object) -> dict[str, LazyCell[Any]]:
    """Cells backing the Inject attributes of obj, keyed by attribute name.

    Creating a cell resolves nothing.
    """
    return {name: d.cell(obj) for name, d in injection_descriptors(type(obj)).items()}


def _lookup_static(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return klass.__dict__[name]
    return None


class TestInjector:
    """Overrides injected attributes of one object.

    Matching:
        key given      only the attribute of that name (type checked if as_type given)
        as_type given  attributes declared with exactly that type
        neither        attributes whose declared type the value is an instance of

    Example:
        TestInjector(sut).inject(primary, key="main").inject(backup, key="backup")
    """

    __test__ = False  # not a pytest test class

    def __init__(self, sut: object) -> None:
        self.sut = sut
        self._descriptors = injection_descriptors(type(sut))

    def inject(self, value: Any, as_type: Any = None, key: str | None = None) -> TestInjector:
        """Override every matching injected attribute with value.

        Args:
            value: Replacement returned by the attribute from now on
            as_type: Declared type to match
            key: Attribute name to match

        Returns:
            self, for chaining

        Raises:
            InjectableNotFoundError: If no attribute matches
        """
        matched = [
            name
            for name, descriptor in self._descriptors.items()
            if self._matches(name, descriptor, value, as_type, key)
        ]
        if not matched:
            raise InjectableNotFoundError(as_type if as_type is not None else type(value), key)

        for name in matched:
            self._descriptors[name].cell(self.sut).set_for_testing(value)
            logger.debug(
                "Injected %s into %s.%s", describe_key(type(value)), type(self.sut).__name__, name
            )
        return self

    @staticmethod
    def _matches(
        name: str,
        descriptor: Inject[Any],
        value: Any,
        as_type: Any,
        key: str | None,
    ) -> bool:
        if key is not None and name != key:
            return False
        declared = descriptor.type_key
        if as_type is not None:
            return declared == as_type
        if key is not None:
            return True
        if not isinstance(declared, type):
            return False
        try:
            return isinstance(value, declared)
        except TypeError:
            # Protocol without @runtime_checkable: match by as_type instead
            return False
