"""Applicative typeclass and its instances."""

from __future__ import annotations

import asyncio
import copy
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from kitten.kernel import Const, Either, Kleisli, Left, Prod, Right, Valid, Validated

Combine = Callable[[Any, Any], Any]


class Applicative(ABC):
    """
    An applicative functor over some effect F.

    Instances implement ``pure`` and ``map2``; everything else is derived.
    Applicative combines independent computations: neither side of map2
    can depend on the value produced by the other.

    Values are passed explicitly (``app.map2(fa, fb, f)``) so the same
    data type can have several instances, e.g. Either as fail-fast and
    Validated as accumulating.
    """

    @abstractmethod
    def pure(self, value: Any) -> Any:
        """Lift a plain value into F."""
        pass

    @abstractmethod
    def map2(self, fa: Any, fb: Any, f: Callable[[Any, Any], Any]) -> Any:
        """Combine two effects, applying f to both values."""
        pass

    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        return self.map2(fa, self.pure(None), lambda a, _: f(a))

    def ap(self, ff: Any, fa: Any) -> Any:
        return self.map2(ff, fa, lambda g, a: g(a))

    def product(self, fa: Any, fb: Any) -> Any:
        return self.map2(fa, fb, lambda a, b: (a, b))

    def product_r(self, fa: Any, fb: Any) -> Any:
        """Run both effects, keep the right value (``*>``)."""
        return self.map2(fa, fb, lambda _, b: b)

    def product_l(self, fa: Any, fb: Any) -> Any:
        """Run both effects, keep the left value (``<*``)."""
        return self.map2(fa, fb, lambda a, _: a)

    def map_n(self, f: Callable[..., Any], *fas: Any) -> Any:
        """Combine any number of effects, applying f to all their values.

        The default chains map2. Instances whose map2 builds nested
        closures override it to run every effect from one closure.
        """
        if not fas:
            return self.pure(f())
        acc = self.map(fas[0], lambda a: (a,))
        for fb in fas[1:]:
            acc = self.map2(acc, fb, lambda t, b: t + (b,))
        return self.map(acc, lambda t: f(*t))

    def tuple_n(self, *fas: Any) -> Any:
        return self.map_n(lambda *values: values, *fas)

    def short_circuits(self, fa: Any) -> bool:
        """Whether combining fa with anything can only ever return fa.

        traverse uses this to stop calling the per-element function early.
        """
        return False


class EitherApplicative(Applicative):
    """Fail-fast applicative: the first Left wins."""

    def pure(self, value: Any) -> Either[Any, Any]:
        return Right(value)

    def map(self, fa: Either[Any, Any], f: Callable[[Any], Any]) -> Either[Any, Any]:
        return fa.map(f)

    def map2(self, fa: Either[Any, Any], fb: Either[Any, Any], f: Callable[[Any, Any], Any]) -> Either[Any, Any]:
        return fa.flat_map(lambda a: fb.map(lambda b: f(a, b)))

    def short_circuits(self, fa: Any) -> bool:
        return isinstance(fa, Left)


class ValidatedApplicative(Applicative):
    """Accumulating applicative: errors of every Invalid are combined.

    Args:
        combine: Semigroup operation for the error type. ``+`` concatenates
            NonEmptyLists, lists, tuples and strings.
    """

    def __init__(self, combine: Combine = operator.add) -> None:
        self.combine = combine

    def pure(self, value: Any) -> Validated[Any, Any]:
        return Valid(value)

    def map(self, fa: Validated[Any, Any], f: Callable[[Any], Any]) -> Validated[Any, Any]:
        return fa.map(f)

    def map2(
        self, fa: Validated[Any, Any], fb: Validated[Any, Any], f: Callable[[Any, Any], Any]
    ) -> Validated[Any, Any]:
        return fa.product(fb, self.combine).map(lambda pair: f(*pair))


class ConstApplicative(Applicative):
    """Monoid accumulation that ignores values entirely.

    Args:
        empty: Identity element of the monoid. pure hands out a shallow
            copy, so a caller mutating a folded result cannot change it.
        combine: Associative operation of the monoid.
    """

    def __init__(self, empty: Any, combine: Combine = operator.add) -> None:
        self.empty = empty
        self.combine = combine

    def pure(self, value: Any) -> Const[Any, Any]:
        return Const(copy.copy(self.empty))

    def map(self, fa: Const[Any, Any], f: Callable[[Any], Any]) -> Const[Any, Any]:
        return fa

    def map2(self, fa: Const[Any, Any], fb: Const[Any, Any], f: Callable[[Any, Any], Any]) -> Const[Any, Any]:
        return Const(self.combine(fa.value, fb.value))


class ReaderApplicative(Applicative):
    """Functions sharing a single input, e.g. ``str -> A`` validators."""

    def pure(self, value: Any) -> Callable[[Any], Any]:
        return lambda _: value

    def map(self, fa: Callable[[Any], Any], f: Callable[[Any], Any]) -> Callable[[Any], Any]:
        return lambda env: f(fa(env))

    def map2(
        self, fa: Callable[[Any], Any], fb: Callable[[Any], Any], f: Callable[[Any, Any], Any]
    ) -> Callable[[Any], Any]:
        return lambda env: f(fa(env), fb(env))

    def map_n(self, f: Callable[..., Any], *fas: Callable[[Any], Any]) -> Callable[[Any], Any]:
        return lambda env: f(*[fa(env) for fa in fas])


class KleisliApplicative(Applicative):
    """Asynchronous functions sharing a single input.

    map2 runs both sides concurrently with asyncio.gather, which is sound
    because applicative computations cannot depend on each other.
    """

    def pure(self, value: Any) -> Kleisli[Any, Any]:
        return Kleisli.pure(value)

    def map(self, fa: Kleisli[Any, Any], f: Callable[[Any], Any]) -> Kleisli[Any, Any]:
        async def _run(env: Any) -> Any:
            return f(await fa(env))

        return Kleisli(_run)

    def map2(
        self, fa: Kleisli[Any, Any], fb: Kleisli[Any, Any], f: Callable[[Any, Any], Any]
    ) -> Kleisli[Any, Any]:
        async def _run(env: Any) -> Any:
            a, b = await asyncio.gather(fa(env), fb(env))
            return f(a, b)

        return Kleisli(_run)

    def map_n(self, f: Callable[..., Any], *fas: Kleisli[Any, Any]) -> Kleisli[Any, Any]:
        async def _run(env: Any) -> Any:
            values = await asyncio.gather(*(fa(env) for fa in fas))
            return f(*values)

        return Kleisli(_run)


class ProductApplicative(Applicative):
    """Component-wise product of two applicatives, carried as Prod."""

    def __init__(self, first: Applicative, second: Applicative) -> None:
        self.first = first
        self.second = second

    def pure(self, value: Any) -> Prod[Any, Any]:
        return Prod(self.first.pure(value), self.second.pure(value))

    def map(self, fa: Prod[Any, Any], f: Callable[[Any], Any]) -> Prod[Any, Any]:
        return Prod(self.first.map(fa.first, f), self.second.map(fa.second, f))

    def map2(self, fa: Prod[Any, Any], fb: Prod[Any, Any], f: Callable[[Any, Any], Any]) -> Prod[Any, Any]:
        return Prod(
            self.first.map2(fa.first, fb.first, f),
            self.second.map2(fa.second, fb.second, f),
        )

    def map_n(self, f: Callable[..., Any], *fas: Prod[Any, Any]) -> Prod[Any, Any]:
        return Prod(
            self.first.map_n(f, *(fa.first for fa in fas)),
            self.second.map_n(f, *(fa.second for fa in fas)),
        )


either_applicative = EitherApplicative()
validated_applicative = ValidatedApplicative()
reader_applicative = ReaderApplicative()
kleisli_applicative = KleisliApplicative()
list_const_applicative = ConstApplicative(empty=[], combine=operator.add)
