"""Const - an applicative value that only carries an accumulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

C = TypeVar("C")
A = TypeVar("A")


@dataclass(frozen=True)
class Const(Generic[C, A]):
    """
    Holds a value of type C and pretends to hold an A.

    Interpreting a program into Const collects information about the
    program (for instance, log lines) without running anything.
    """

    value: C

    def get_const(self) -> C:
        return self.value
