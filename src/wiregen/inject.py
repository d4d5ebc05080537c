"""Lazy injection: per-instance cells resolved from the container on first read.

Usage:
    class OrderService:
        repository: OrderRepository = Inject()
        clock = Inject(Clock)

        def place(self, order: Order) -> None:
            self.repository.save(order, at=self.clock.now())

Nothing is resolved when OrderService() is constructed. The first read of
``self.repository`` resolves OrderRepository from the container and caches
the instance in that object's cell; later reads return the cached value.
"""

from __future__ import annotations

import threading
import typing
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from wiregen.container import AppContainer
from wiregen.domain.exceptions.resolution import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

T = TypeVar("T")

SLOTS_ATTRIBUTE = "__wiregen_slots__"
_CELL_PREFIX = "__wiregen_cell_"

_UNSET: Any = object()


class LazyCell(Generic[T]):
    """Value produced by resolver on first get(), then cached.

    Thread-safe: concurrent first reads call resolver exactly once, all of
    them observe the same value.
    """

    __slots__ = ("_lock", "_resolver", "_value")

    def __init__(self, resolver: Callable[[], T]) -> None:
        self._resolver = resolver
        self._value: Any = _UNSET
        self._lock = threading.Lock()

    def get(self) -> T:
        value = self._value
        if value is not _UNSET:
            return value
        with self._lock:
            if self._value is _UNSET:
                self._value = self._resolver()
            return self._value

    def set_for_testing(self, value: T) -> None:
        """Replace the cached value; resolver is no longer consulted."""
        with self._lock:
            self._value = value

    @property
    def is_resolved(self) -> bool:
        """Check if a value is cached (resolved or overridden)."""
        return self._value is not _UNSET

    def reset(self) -> None:
        """Forget the cached value; next get() resolves again."""
        with self._lock:
            self._value = _UNSET

    def __repr__(self) -> str:
        state = "resolved" if self.is_resolved else "pending"
        return f"<LazyCell {state}>"


class Inject(Generic[T]):
    """Class attribute descriptor marking an injection site.

    ``attr: T = Inject()`` injects the annotated type, ``attr = Inject(T)``
    the explicit one (which wins when both are present). Each instance gets
    its own LazyCell; the key is resolved against ``container`` or, if None,
    against ``AppContainer.shared()`` at first read.

    Every class declaring Inject attributes gets a ``__wiregen_slots__``
    mapping of attribute name -> descriptor, read by wiregen.testing.
    """

    def __init__(self, type_key: Hashable = _UNSET, *, container: AppContainer | None = None):
        self._explicit_key = type_key
        self._resolved_key: Any = _UNSET
        self._container = container
        self.name: str | None = None
        self.owner: type | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner
        # Own mapping per class: subclasses must not write into the parent's
        slots = owner.__dict__.get(SLOTS_ATTRIBUTE)
        if slots is None:
            slots = {}
            setattr(owner, SLOTS_ATTRIBUTE, slots)
        slots[name] = self

    @property
    def type_key(self) -> Hashable:
        """Key resolved from the container.

        Raises:
            ConfigurationError: If no explicit key was given and the owner's
                annotation is missing or cannot be evaluated
        """
        if self._explicit_key is not _UNSET:
            return self._explicit_key
        if self._resolved_key is _UNSET:
            self._resolved_key = self._key_from_annotation()
        return self._resolved_key

    @property
    def container(self) -> AppContainer:
        return self._container if self._container is not None else AppContainer.shared()

    def cell(self, instance: object) -> LazyCell[T]:
        """Cell backing this attribute on instance, created on first use.

        Raises:
            ConfigurationError: If instance has no __dict__ (__slots__ class)
        """
        storage = getattr(instance, "__dict__", None)
        if storage is None:
            raise ConfigurationError(
                f"{type(instance).__name__}.{self.name}: Inject requires instances "
                "with a __dict__"
            )
        key = _CELL_PREFIX + self._require_name()
        cell = storage.get(key)
        if cell is None:
            # setdefault: two threads racing here still end up sharing one cell
            cell = storage.setdefault(key, LazyCell(self._resolve))
        return cell

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> Inject[T]: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> T: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.cell(instance).get()

    def __set__(self, instance: object, value: Any) -> None:
        raise AttributeError(
            f"{type(instance).__name__}.{self.name} is injected and cannot be assigned; "
            "use wiregen.testing.TestInjector to override it"
        )

    def __repr__(self) -> str:
        if self._explicit_key is not _UNSET:
            return f"Inject({self._explicit_key!r})"
        return f"Inject() <{self.name}>"

    def _resolve(self) -> T:
        return self.container.resolve(self.type_key)

    def _require_name(self) -> str:
        if self.name is None:
            raise ConfigurationError("Inject must be assigned as a class attribute")
        return self.name

    def _key_from_annotation(self) -> Any:
        name = self._require_name()
        assert self.owner is not None
        try:
            hints = typing.get_type_hints(self.owner)
        except NameError as e:
            raise ConfigurationError(
                f"{self.owner.__qualname__}.{name}: cannot evaluate annotation: {e}"
            ) from e
        if name not in hints:
            raise ConfigurationError(
                f"{self.owner.__qualname__}.{name}: Inject() needs a type annotation "
                "or an explicit type argument"
            )
        return hints[name]
