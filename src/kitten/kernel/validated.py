"""Validated - an error-accumulating result type."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from kitten.errors import NoValueError
from kitten.kernel.nel import NonEmptyList

if TYPE_CHECKING:
    from kitten.kernel.either import Either

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
X = TypeVar("X")
M = TypeVar("M", bound=BaseModel)

Combine = Callable[[Any, Any], Any]
ExceptionTypes = type[Exception] | tuple[type[Exception], ...]


class Validated(Generic[E, A]):
    """
    A value that is either Valid or Invalid.

    Unlike Either, combining two Validated values does not stop at the
    first failure: the errors of both sides are combined. Validated is
    therefore not a monad, there is no flat_map.
    """

    __slots__ = ()

    @staticmethod
    def valid(value: A) -> Validated[Any, A]:
        return Valid(value)

    @staticmethod
    def invalid(error: E) -> Validated[E, Any]:
        return Invalid(error)

    @staticmethod
    def invalid_nel(error: E) -> Validated[NonEmptyList[E], Any]:
        return Invalid(NonEmptyList.of(error))

    @staticmethod
    def catch_only(exc_types: ExceptionTypes, thunk: Callable[[], A]) -> Validated[Exception, A]:
        """Run thunk, capturing only the given exception types as Invalid."""
        try:
            return Valid(thunk())
        except exc_types as exc:
            return Invalid(exc)

    @staticmethod
    def catch_non_fatal(thunk: Callable[[], A]) -> Validated[Exception, A]:
        return Validated.catch_only(Exception, thunk)

    @staticmethod
    def from_pydantic(model: type[M], data: Any) -> Validated[NonEmptyList[dict[str, Any]], M]:
        """Validate data against a pydantic model.

        Every field error reported by pydantic becomes one entry of the
        Invalid NonEmptyList, in the order pydantic reports them.
        """
        try:
            return Valid(model.model_validate(data))
        except ValidationError as exc:
            return Invalid(NonEmptyList.from_iterable(exc.errors(include_url=False)))

    @property
    def is_valid(self) -> bool:
        return isinstance(self, Valid)

    @property
    def is_invalid(self) -> bool:
        return isinstance(self, Invalid)

    def map(self, f: Callable[[A], B]) -> Validated[E, B]:
        if isinstance(self, Valid):
            return Valid(f(self.value))
        return self  # type: ignore[return-value]

    def left_map(self, f: Callable[[E], F]) -> Validated[F, A]:
        if isinstance(self, Invalid):
            return Invalid(f(self.error))
        return self  # type: ignore[return-value]

    def fold(self, if_invalid: Callable[[E], X], if_valid: Callable[[A], X]) -> X:
        if isinstance(self, Valid):
            return if_valid(self.value)
        return if_invalid(self.error)  # type: ignore[attr-defined]

    def product(self, other: Validated[E, B], combine: Combine = operator.add) -> Validated[E, tuple[A, B]]:
        """Pair two Validated values, combining errors when both are Invalid."""
        match self, other:
            case Valid(a), Valid(b):
                return Valid((a, b))
            case Invalid(e1), Invalid(e2):
                return Invalid(combine(e1, e2))
            case Invalid(), _:
                return self  # type: ignore[return-value]
            case _:
                return other  # type: ignore[return-value]

    def get(self) -> A:
        if isinstance(self, Valid):
            return self.value
        raise NoValueError("Invalid has no value.", self.error)  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        if isinstance(self, Valid):
            return self.value
        return default

    def to_either(self) -> Either[E, A]:
        from kitten.kernel.either import Left, Right

        if isinstance(self, Valid):
            return Right(self.value)
        return Left(self.error)  # type: ignore[attr-defined]

    def to_validated_nel(self) -> Validated[NonEmptyList[E], A]:
        if isinstance(self, Invalid):
            return Invalid(NonEmptyList.of(self.error))
        return self  # type: ignore[return-value]


@dataclass(frozen=True)
class Valid(Validated[E, A]):
    """A successful Validated."""

    value: A

    def __repr__(self) -> str:
        return f"Valid({self.value!r})"


@dataclass(frozen=True)
class Invalid(Validated[E, A]):
    """A failed Validated carrying its accumulated error."""

    error: E

    def __repr__(self) -> str:
        return f"Invalid({self.error!r})"


ValidatedNel = Validated[NonEmptyList[E], A]
