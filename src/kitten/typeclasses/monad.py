"""Monad instance for Either."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from kitten.kernel import Either, Left, Right
from kitten.typeclasses.applicative import EitherApplicative

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")


class EitherMonad(EitherApplicative):
    """Either with the left type fixed: computation continues only on Right."""

    def flat_map(self, fa: Either[E, A], f: Callable[[A], Either[E, B]]) -> Either[E, B]:
        return fa.flat_map(f)

    def tail_rec_m(self, a: A, f: Callable[[A], Either[E, Either[A, B]]]) -> Either[E, B]:
        """Iterate f until it produces a final value, in constant stack.

        - Right(Left(a)): loop again with a
        - Right(Right(b)): done with b
        - Left(e): stop with e

        Any other step result raises TypeError.
        """
        current: Any = a
        while True:
            match f(current):
                case Right(Right(b)):
                    return Right(b)
                case Right(Left(next_a)):
                    current = next_a
                case Left() as failed:
                    return failed
                case other:
                    raise TypeError(f"tail_rec_m step must return Either[E, Either[A, B]], got {other!r}")


either_monad = EitherMonad()
