"""Prod and Kleisli - carriers for composite interpreters."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
FA = TypeVar("FA")
GA = TypeVar("GA")


@dataclass(frozen=True)
class Prod(Generic[FA, GA]):
    """A pair of values in two different applicatives, F[A] and G[A]."""

    first: FA
    second: GA


@dataclass(frozen=True)
class Kleisli(Generic[A, B]):
    """An asynchronous function ``A -> Awaitable[B]``.

    Calling a Kleisli returns the awaitable produced by ``run``.
    """

    run: Callable[[A], Awaitable[B]]

    def __call__(self, value: A) -> Awaitable[B]:
        return self.run(value)

    @staticmethod
    def pure(value: B) -> Kleisli[Any, B]:
        async def _run(_: Any) -> B:
            return value

        return Kleisli(_run)
