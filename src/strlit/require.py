"""
Precondition checks for strlit.

A violated precondition is an error the caller can catch, never a silent
abort. Specific violations get their own subclass so callers can tell
them apart.
"""

from typing import Type


class RequireError(Exception):
    """Raised when a required precondition does not hold."""
    pass


class NullReference(RequireError):
    """Raised when a view is constructed from a null reference."""
    pass


def require(
    condition: object,
    message: str = "requirement failed",
    error: Type[RequireError] = RequireError,
) -> None:
    """
    Raise ``error(message)`` unless ``condition`` is truthy.

    Args:
        condition: Value that must be truthy
        message: Error message when the requirement fails
        error: RequireError subclass to raise

    Raises:
        RequireError: (or the given subclass) if condition is falsy
    """
    if not condition:
        raise error(message)


__all__ = ["RequireError", "NullReference", "require"]
