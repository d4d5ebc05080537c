"""Runtime resolution container.

One process-wide registry mapping type keys to factories and lifetimes,
populated by the generated ``register_dependencies()`` at startup and read
by injection sites for the rest of the process.

Locking:
    - one registry lock guards the key -> registration map; it is never held
      while a factory runs, so factories may resolve other types
    - one lock per singleton registration makes first creation a single
      factory call even under concurrent first resolves
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar, overload

from wiregen.domain.exceptions.resolution import UnregisteredTypeError, describe_key

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

T = TypeVar("T")

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class _Registration:
    """Factory and lifetime of one key, plus the singleton instance once created.

    Replaced wholesale on re-registration, so an instance never outlives
    the registration that produced it.
    """

    __slots__ = ("factory", "instance", "key", "lock", "singleton")

    def __init__(self, key: Hashable, factory: Callable[[], Any], *, singleton: bool) -> None:
        self.key = key
        self.factory = factory
        self.singleton = singleton
        self.instance: Any = _MISSING
        # Re-entrant: a factory resolving its own key recurses instead of deadlocking
        self.lock = threading.RLock()

    def create(self) -> Any:
        if not self.singleton:
            return self.factory()

        instance = self.instance
        if instance is not _MISSING:
            return instance

        with self.lock:
            if self.instance is _MISSING:
                self.instance = self.factory()
                logger.debug("Created singleton %s", describe_key(self.key))
            return self.instance


class AppContainer:
    """Thread-safe registry of factories keyed by type.

    Use ``AppContainer.shared()`` for the process-wide instance; construct
    one directly for isolated wiring (tests, sub-applications).

    Example:
        container = AppContainer()
        container.register_singleton(Clock, SystemClock)
        container.register(Handler, lambda: Handler(container.resolve(Clock)))

        clock = container.resolve(Clock)
    """

    _shared: ClassVar[AppContainer | None] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registrations: dict[Hashable, _Registration] = {}

    @classmethod
    def shared(cls) -> AppContainer:
        """Process-wide container, created on first access."""
        shared = cls._shared
        if shared is not None:
            return shared
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    @classmethod
    def reset_shared(cls) -> None:
        """Drop the process-wide container.

        The next shared() call returns a fresh, empty container. Objects
        already holding the old one keep it.
        """
        with cls._shared_lock:
            cls._shared = None

    def register(
        self,
        type_key: Hashable,
        factory: Callable[[], Any],
        *,
        singleton: bool = False,
    ) -> None:
        """Register factory for type_key.

        Replaces any previous registration of the key; a singleton instance
        created by the previous registration is dropped.

        Args:
            type_key: Key consumers resolve (usually a class)
            factory: Zero-argument callable producing the instance
            singleton: Cache the first instance instead of calling factory
                on every resolve

        Raises:
            TypeError: If factory is not callable (FAIL-FIRST)
        """
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")

        registration = _Registration(type_key, factory, singleton=singleton)
        with self._lock:
            replaced = type_key in self._registrations
            self._registrations[type_key] = registration

        logger.debug(
            "%s %s as %s",
            "Re-registered" if replaced else "Registered",
            describe_key(type_key),
            "singleton" if singleton else "transient",
        )

    def register_singleton(self, type_key: Hashable, factory: Callable[[], Any]) -> None:
        """Register factory for type_key with singleton lifetime."""
        self.register(type_key, factory, singleton=True)

    @overload
    def resolve(self, type_key: type[T]) -> T: ...

    @overload
    def resolve(self, type_key: Hashable) -> Any: ...

    def resolve(self, type_key: Hashable) -> Any:
        """Instance for type_key.

        Singletons return the cached instance, created on first resolve.
        Transients call the factory every time.

        Args:
            type_key: Registered key

        Returns:
            Instance produced by the registered factory

        Raises:
            UnregisteredTypeError: If type_key was never registered
        """
        with self._lock:
            registration = self._registrations.get(type_key)

        if registration is None:
            raise UnregisteredTypeError(type_key)

        return registration.create()

    def is_registered(self, type_key: Hashable) -> bool:
        """Check if type_key has a registration."""
        with self._lock:
            return type_key in self._registrations

    def registered_types(self) -> tuple[Hashable, ...]:
        """Registered keys, in registration order."""
        with self._lock:
            return tuple(self._registrations)

    def reset(self) -> None:
        """Drop every registration and singleton instance."""
        with self._lock:
            self._registrations.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)

    def __contains__(self, type_key: object) -> bool:
        try:
            return self.is_registered(type_key)  # type: ignore[arg-type]
        except TypeError:
            # unhashable key
            return False
