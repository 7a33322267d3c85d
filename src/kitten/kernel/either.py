"""Either - a right-biased, fail-fast result type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from kitten.errors import NoValueError

if TYPE_CHECKING:
    from kitten.kernel.validated import Validated

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
X = TypeVar("X")

ExceptionTypes = type[Exception] | tuple[type[Exception], ...]


class Either(Generic[E, A]):
    """
    A value that is either a failure (Left) or a success (Right).

    Either is right-biased: map and flat_map act on Right and pass a Left
    through untouched, so a chain of steps stops at the first Left.

    Use Left and Right in ``match`` statements:

        match parse("42"):
            case Right(n): ...
            case Left(NotANumber(s)): ...
    """

    __slots__ = ()

    @staticmethod
    def right(value: A) -> Either[Any, A]:
        return Right(value)

    @staticmethod
    def left(error: E) -> Either[E, Any]:
        return Left(error)

    @staticmethod
    def catch_only(exc_types: ExceptionTypes, thunk: Callable[[], A]) -> Either[Exception, A]:
        """Run thunk, capturing only the given exception types as Left.

        Any other exception propagates to the caller.
        """
        try:
            return Right(thunk())
        except exc_types as exc:
            return Left(exc)

    @staticmethod
    def catch_non_fatal(thunk: Callable[[], A]) -> Either[Exception, A]:
        """Run thunk, capturing any Exception as Left.

        KeyboardInterrupt, SystemExit and other non-Exception errors propagate.
        """
        return Either.catch_only(Exception, thunk)

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    def map(self, f: Callable[[A], B]) -> Either[E, B]:
        if isinstance(self, Right):
            return Right(f(self.value))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[A], Either[E, B]]) -> Either[E, B]:
        if isinstance(self, Right):
            return f(self.value)
        return self  # type: ignore[return-value]

    def left_map(self, f: Callable[[E], F]) -> Either[F, A]:
        if isinstance(self, Left):
            return Left(f(self.value))
        return self  # type: ignore[return-value]

    def fold(self, if_left: Callable[[E], X], if_right: Callable[[A], X]) -> X:
        if isinstance(self, Right):
            return if_right(self.value)
        return if_left(self.value)  # type: ignore[attr-defined]

    def ensure(self, error: E, predicate: Callable[[A], bool]) -> Either[E, A]:
        """Turn a Right whose value fails predicate into Left(error)."""
        if isinstance(self, Right) and not predicate(self.value):
            return Left(error)
        return self

    def swap(self) -> Either[A, E]:
        if isinstance(self, Right):
            return Left(self.value)
        return Right(self.value)  # type: ignore[attr-defined]

    def get(self) -> A:
        if isinstance(self, Right):
            return self.value
        raise NoValueError("Left has no value.", self.value)  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        if isinstance(self, Right):
            return self.value
        return default

    def or_else(self, other: Either[E, A]) -> Either[E, A]:
        return self if isinstance(self, Right) else other

    def to_validated(self) -> Validated[E, A]:
        from kitten.kernel.validated import Invalid, Valid

        if isinstance(self, Right):
            return Valid(self.value)
        return Invalid(self.value)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Left(Either[E, A]):
    """The failure side of Either."""

    value: E

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True)
class Right(Either[E, A]):
    """The success side of Either."""

    value: A

    def __repr__(self) -> str:
        return f"Right({self.value!r})"
