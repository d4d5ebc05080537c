"""Base exceptions for wiregen."""


class WiregenError(Exception):
    """Root exception for all wiregen errors.

    All domain exceptions inherit from this.
    Allows catching all wiregen-specific errors.
    """
