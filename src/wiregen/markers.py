"""Declaration markers read by the wiregen scanner.

The scanner works on source text, so these decorators only record what
they declare on the class and return it unchanged.

    @bind(PaymentGateway)
    @singleton
    class StripeGateway: ...

    @bind()
    class Clock: ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

C = TypeVar("C", bound=type)

BINDINGS_ATTRIBUTE = "__wiregen_bindings__"
SINGLETON_ATTRIBUTE = "__wiregen_singleton__"


def bind(*types: Any) -> Callable[[C], C]:
    """Bind the decorated class as implementation of types.

    ``@bind()`` binds the class under itself. Always call it: a bare
    ``@bind`` would look like ``bind(SomeType)`` applied to nothing.

    Args:
        *types: Contracts the class implements (the class itself if empty)

    Returns:
        Class decorator

    Raises:
        TypeError: If a type is None (FAIL-FIRST)
    """
    for type_key in types:
        if type_key is None:
            raise TypeError("bind() types must not be None")

    def decorator(cls: C) -> C:
        if not isinstance(cls, type):
            raise TypeError(f"@bind applies to classes, got {type(cls).__name__}")
        declared = cls.__dict__.get(BINDINGS_ATTRIBUTE, ())
        setattr(cls, BINDINGS_ATTRIBUTE, (*declared, *(types or (cls,))))
        return cls

    return decorator


def singleton(cls: C) -> C:
    """Give every binding of the decorated class singleton lifetime.

    Raises:
        TypeError: If applied to something other than a class
    """
    if not isinstance(cls, type):
        raise TypeError(f"@singleton applies to classes, got {type(cls).__name__}")
    setattr(cls, SINGLETON_ATTRIBUTE, True)
    return cls


def declared_bindings(cls: type) -> tuple[Any, ...]:
    """Types cls was bound to with @bind, in declaration order."""
    return tuple(cls.__dict__.get(BINDINGS_ATTRIBUTE, ()))


def is_singleton(cls: type) -> bool:
    """Check if cls was marked @singleton (subclasses do not inherit it)."""
    return bool(cls.__dict__.get(SINGLETON_ATTRIBUTE, False))
