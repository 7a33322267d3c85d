"""Free applicative - applicative programs as data.

A FreeApplicative describes a computation built from the operations of
some algebra (any Python values, usually small frozen dataclasses)
using only applicative combinators. Nothing runs until the program is
interpreted with fold_map.

Because an applicative program cannot branch on intermediate results,
its whole shape is known up front. Interpreters can use that to run
every operation concurrently, or to inspect the program without running
it at all (see analyze).
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from kitten.kernel import Const
from kitten.typeclasses.applicative import Applicative, ConstApplicative

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

# A natural transformation from the algebra into some applicative:
# each operation is mapped to an F[A] of the target applicative.
Interpreter = Callable[[Any], Any]


class FreeApplicative(Generic[A]):
    """A program in the free applicative over an operation algebra."""

    __slots__ = ()

    def map(self, f: Callable[[A], B]) -> FreeApplicative[B]:
        return Map2(self, Pure(None), lambda a, _: f(a))

    def map2(self, other: FreeApplicative[B], f: Callable[[A, B], C]) -> FreeApplicative[C]:
        return Map2(self, other, f)

    def product(self, other: FreeApplicative[B]) -> FreeApplicative[tuple[A, B]]:
        return Map2(self, other, lambda a, b: (a, b))

    def product_r(self, other: FreeApplicative[B]) -> FreeApplicative[B]:
        """Sequence both programs, keeping the right result (``*>``)."""
        return Map2(self, other, lambda _, b: b)

    def product_l(self, other: FreeApplicative[B]) -> FreeApplicative[A]:
        """Sequence both programs, keeping the left result (``<*``)."""
        return Map2(self, other, lambda a, _: a)

    def fold_map(self, interpreter: Interpreter, applicative: Applicative) -> Any:
        """Interpret the program into the target applicative.

        Operations are interpreted left to right, so effects that record
        order (logs, lists) follow the order the program was written in.
        The walk keeps its own stack of pending nodes, so program depth is
        not bounded by Python's recursion limit. The value built
        is only as stack-safe as the applicative's map2.

        Args:
            interpreter: Maps each lifted operation to a value of the applicative
            applicative: Instance used to combine interpreted operations

        Returns:
            The program's value inside the target applicative

        Raises:
            UnhandledOperationError: Propagated from an interpreter that does
                not recognise an operation.
        """
        pending: list[Any] = [self]
        results: list[Any] = []
        while pending:
            match pending.pop():
                case Pure(value):
                    results.append(applicative.pure(value))
                case Lift(op):
                    logger.debug("interpreting %r", op)
                    results.append(interpreter(op))
                case Map2(left, right, fn):
                    # left is popped first; _Combine runs once both sides are done
                    pending.extend((_Combine(fn), right, left))
                case _Combine(fn):
                    fb = results.pop()
                    fa = results.pop()
                    results.append(applicative.map2(fa, fb, fn))
                case node:
                    raise TypeError(f"Unknown FreeApplicative node: {type(node).__name__}")
        return results.pop()

    def analyze(self, interpreter: Callable[[Any], C], empty: C, combine: Callable[[C, C], C] = operator.add) -> C:
        """Summarise the program into a monoid without running it.

        Args:
            interpreter: Maps each operation to a monoid value (e.g. a list of strings)
            empty: Identity element of the monoid
            combine: Associative operation of the monoid

        Returns:
            The combination of every operation's monoid value, in program order
        """
        folded = self.fold_map(lambda op: Const(interpreter(op)), ConstApplicative(empty, combine))
        return folded.get_const()


@dataclass(frozen=True)
class Pure(FreeApplicative[A]):
    value: A


@dataclass(frozen=True)
class Lift(FreeApplicative[A]):
    op: Any


@dataclass(frozen=True)
class Map2(FreeApplicative[A]):
    left: FreeApplicative[Any]
    right: FreeApplicative[Any]
    fn: Callable[[Any, Any], A]


@dataclass(frozen=True)
class _Combine:
    """Marker left on fold_map's stack: combine the last two results with fn."""

    fn: Callable[[Any, Any], Any]


def lift(op: Any) -> FreeApplicative[Any]:
    """Lift a single operation of the algebra into a program."""
    return Lift(op)


def pure(value: A) -> FreeApplicative[A]:
    return Pure(value)


def map_n(f: Callable[..., A], *programs: FreeApplicative[Any]) -> FreeApplicative[A]:
    """Combine several independent programs with an n-ary function."""
    if not programs:
        return Pure(f())
    acc: FreeApplicative[tuple[Any, ...]] = programs[0].map(lambda a: (a,))
    for program in programs[1:]:
        acc = acc.map2(program, lambda t, b: t + (b,))
    return acc.map(lambda t: f(*t))
