"""Error types raised when kitten data types are misused."""

from __future__ import annotations


class KittenError(Exception):
    """Base class for all kitten errors."""


class NoValueError(KittenError, ValueError):
    """Raised by get() on a Left or Invalid.

    The failure carried by the container is kept on ``error``.
    """

    def __init__(self, message: str, error: object) -> None:
        self.error = error
        super().__init__(message)


class EmptyListError(KittenError, ValueError):
    """Raised when a NonEmptyList would be built from nothing."""


class UnhandledOperationError(KittenError):
    """Error raised by an interpreter that does not understand an operation.

    The offending operation is preserved so callers can report it.
    """

    def __init__(self, op: object) -> None:
        self.op = op
        super().__init__(f"No interpretation for operation: {op!r}")

    def __repr__(self) -> str:
        return f"UnhandledOperationError(op={self.op!r})"
