"""NonEmptyList - a list with at least one element."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from kitten.errors import EmptyListError

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class NonEmptyList(Generic[A]):
    """
    An immutable list that always holds at least one element.

    Used as the error side of ValidatedNel so that an Invalid always
    carries at least one failure. Concatenation with ``+`` makes it a
    semigroup.
    """

    head: A
    tail: tuple[A, ...] = field(default_factory=tuple)

    @staticmethod
    def of(head: A, *tail: A) -> NonEmptyList[A]:
        return NonEmptyList(head, tuple(tail))

    @staticmethod
    def from_iterable(items: Iterable[A]) -> NonEmptyList[A]:
        """Build from any iterable.

        Raises:
            EmptyListError: If items yields nothing.
        """
        it = iter(items)
        try:
            head = next(it)
        except StopIteration:
            raise EmptyListError("Cannot build a NonEmptyList from an empty iterable") from None
        return NonEmptyList(head, tuple(it))

    @property
    def size(self) -> int:
        return 1 + len(self.tail)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[A]:
        yield self.head
        yield from self.tail

    def __getitem__(self, index: int) -> A:
        return self.to_list()[index]

    def __add__(self, other: Any) -> NonEmptyList[A]:
        if not isinstance(other, NonEmptyList):
            return NotImplemented
        return self.concat(other)

    def concat(self, other: NonEmptyList[A]) -> NonEmptyList[A]:
        return NonEmptyList(self.head, self.tail + (other.head,) + other.tail)

    def append(self, item: A) -> NonEmptyList[A]:
        return NonEmptyList(self.head, self.tail + (item,))

    def map(self, f: Callable[[A], B]) -> NonEmptyList[B]:
        return NonEmptyList(f(self.head), tuple(f(x) for x in self.tail))

    def to_list(self) -> list[A]:
        return [self.head, *self.tail]

    def __repr__(self) -> str:
        inner = ", ".join(repr(x) for x in self)
        return f"NonEmptyList({inner})"
