"""Runtime resolution exceptions."""

from __future__ import annotations

from typing import Any

from wiregen.domain.exceptions.base import WiregenError


def describe_key(type_key: Any) -> str:
    """Readable name of a registry key (class name or repr)."""
    qualname = getattr(type_key, "__qualname__", None)
    if isinstance(qualname, str):
        return qualname
    return repr(type_key)


class UnregisteredTypeError(WiregenError, LookupError):
    """Resolve of a type that was never registered.

    Wiring is validated at generation time, so this signals a broken
    invariant: generated registrations were not run, or the container
    was reset. Never caught inside wiregen.

    Attributes:
        type_key: The key that was requested
    """

    def __init__(self, type_key: Any) -> None:
        self.type_key = type_key
        super().__init__(
            f"No implementation registered for {describe_key(type_key)}; "
            "was register_dependencies() called?"
        )


class InjectableNotFoundError(WiregenError, LookupError):
    """No injection slot of the test subject matches the override.

    Attributes:
        type_key: Requested slot type, None when matching by value
        key: Requested slot name, None when matching by type
    """

    def __init__(self, type_key: Any, key: str | None) -> None:
        self.type_key = type_key
        self.key = key
        target = describe_key(type_key) if type_key is not None else "value"
        suffix = f" named {key!r}" if key is not None else ""
        super().__init__(f"Injectable not found for {target}{suffix}")


class ConfigurationError(WiregenError, ValueError):
    """Invalid marker or injection declaration detected at runtime.

    Attributes:
        reason: What is wrong
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")
        self.reason = reason
        super().__init__(reason)
