"""
Exception hierarchy for hex_object.

All errors raised by the library inherit from HexObjectError, so callers
can catch every library failure with one except clause. Each concrete
error also inherits from the closest builtin so that generic handlers
(``except LookupError``, ``except TypeError``) keep working.

- PathUnsetError: a dotted path could not be resolved and no default was given
- IncompatibleMergeError: augment was asked to merge a bare sequence root
- InvalidRootError: an operation received a root that is not a mapping
"""

from __future__ import annotations

__all__ = [
    "HexObjectError",
    "IncompatibleMergeError",
    "InvalidRootError",
    "PathUnsetError",
]


class HexObjectError(Exception):
    """Base exception for all hex_object errors."""

    pass


class PathUnsetError(HexObjectError, LookupError):
    """
    Raised by get() when a dotted path cannot be resolved.

    This is the caller's signal that a required configuration key is
    missing. Pass a default (``None`` counts) to get() to suppress it.

    Attributes:
        path: The full dotted path that was requested.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path} unset")


class IncompatibleMergeError(HexObjectError, TypeError):
    """Raised by augment() when a top-level operand is a sequence."""

    def __init__(self, message: str = "attempt to augment an object and an array") -> None:
        super().__init__(message)


class InvalidRootError(HexObjectError, TypeError):
    """
    Raised when an operation is handed a root that is not a mapping.

    augment() always raises this for a scalar first operand. The path
    operations and normalize() raise it only when strict roots are enabled.

    Attributes:
        root_type: Name of the offending root's type.
    """

    def __init__(self, root: object, operation: str) -> None:
        self.root_type = type(root).__name__
        self.operation = operation
        super().__init__(f"{operation}() requires a mapping root, got {self.root_type}")
