"""
FreeApplicative walkthrough - an embedded DSL for validating strings.

Free applicatives represent computations as data, much like free monads,
but only support applicative composition. That restriction is what makes
them interesting: a program cannot branch on an earlier result, so its
whole shape is known before it runs.

This walkthrough shows:
1. Building a small validation algebra and lifting it into programs
2. A plain interpreter: programs become ``str -> bool`` functions
3. A parallel interpreter: every check runs concurrently under asyncio
4. A logging interpreter that inspects a program without running it
5. A product interpreter that validates and logs in a single pass

Reference: McBride & Paterson, "Applicative programming with effects";
Capriotti & Kaposi, "Free Applicative Functors".
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from kitten import Const, FreeApplicative, KittenConfig, Kleisli, Prod, UnhandledOperationError, configure_logging, lift
from kitten.free import map_n
from kitten.typeclasses import (
    ProductApplicative,
    await_result,
    kleisli_applicative,
    list_const_applicative,
    reader_applicative,
)

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


# =============================================================================
# The algebra
# =============================================================================
class ValidationOp:
    """An operation of the string validation DSL."""


@dataclass(frozen=True)
class Size(ValidationOp):
    """The string is at least ``size`` characters long."""

    size: int


@dataclass(frozen=True)
class HasNumber(ValidationOp):
    """The string contains at least one digit."""


Validation = FreeApplicative[bool]


# Smart constructors lift the algebra into programs.
def size(n: int) -> Validation:
    return lift(Size(n))


has_number: Validation = lift(HasNumber())


# Programs are plain data; nothing has been checked yet.
prog: Validation = size(5).map2(has_number, lambda l, r: l and r)


# =============================================================================
# Example 1: Plain interpreter
# =============================================================================
def compiler(op: ValidationOp) -> Any:
    """Interpret each operation as a function from the input string."""
    match op:
        case Size(n):
            return lambda s: len(s) >= n
        case HasNumber():
            return lambda s: any(c in DIGITS for c in s)
        case _:
            raise UnhandledOperationError(op)


def example_plain_interpreter() -> None:
    validator = prog.fold_map(compiler, reader_applicative)

    assert not validator("1234")
    assert validator("12345")
    assert not validator("abcdef")

    print("\n--- Example 1: Plain interpreter ---")
    for s in ("1234", "12345", "abcdef"):
        print(f"  validator({s!r}) = {validator(s)}")


# =============================================================================
# Example 2: Parallel interpreter
# =============================================================================
def par_compiler(op: ValidationOp) -> Kleisli[str, bool]:
    """Interpret each operation as an asynchronous check.

    Because there is no branching, the Kleisli applicative can gather
    every check concurrently.
    """
    match op:
        case Size(n):
            async def check_size(s: str) -> bool:
                await asyncio.sleep(0)
                return len(s) >= n

            return Kleisli(check_size)
        case HasNumber():
            async def check_number(s: str) -> bool:
                await asyncio.sleep(0)
                return any(c in DIGITS for c in s)

            return Kleisli(check_number)
        case _:
            raise UnhandledOperationError(op)


async def example_parallel_interpreter(config: KittenConfig) -> None:
    par_validator = prog.fold_map(par_compiler, kleisli_applicative)

    assert not await await_result(par_validator("1234"), config.await_timeout)
    assert await await_result(par_validator("12345"), config.await_timeout)

    print("\n--- Example 2: Parallel interpreter ---")
    print(f"  par_validator('12345') = {await par_validator('12345')}")


# =============================================================================
# Example 3: Logging interpreter
# =============================================================================
def log_compiler(op: ValidationOp) -> Const[list[str], Any]:
    """Map each rule to a description; the result type is ignored."""
    match op:
        case Size(n):
            return Const([f"size >= {n}"])
        case HasNumber():
            return Const(["has number"])
        case _:
            raise UnhandledOperationError(op)


def log_validation(validation: FreeApplicative[Any]) -> list[str]:
    return validation.fold_map(log_compiler, list_const_applicative).get_const()


def example_logging_interpreter() -> None:
    """
    Logging needs no input string at all: the rules used by a program
    can be read off its structure.
    """
    assert log_validation(prog) == ["size >= 5", "has number"]

    assert log_validation(size(5).product_r(has_number).product_r(size(10))) == [
        "size >= 5",
        "has number",
        "size >= 10",
    ]

    assert log_validation(map_n(lambda l, r: l or r, has_number, size(3))) == [
        "has number",
        "size >= 3",
    ]

    # analyze is the same fold with the Const wrapping done for us.
    assert prog.analyze(lambda op: log_compiler(op).get_const(), empty=[]) == log_validation(prog)

    print("\n--- Example 3: Logging interpreter ---")
    print(f"  log_validation(prog) = {log_validation(prog)}")


# =============================================================================
# Example 4: Product interpreter
# =============================================================================
def prod_compiler(op: ValidationOp) -> Prod[Kleisli[str, bool], Const[list[str], bool]]:
    """Validate and log in one traversal of the program.

    The product of two applicatives is itself an applicative.
    """
    return Prod(par_compiler(op), log_compiler(op))


async def example_product_interpreter(config: KittenConfig) -> None:
    validate_and_log = ProductApplicative(kleisli_applicative, list_const_applicative)
    prod_validation = prog.fold_map(prod_compiler, validate_and_log)

    assert prod_validation.second.get_const() == ["size >= 5", "has number"]
    assert await await_result(prod_validation.first("12345"), config.await_timeout)
    assert not await await_result(prod_validation.first("abcde"), config.await_timeout)

    print("\n--- Example 4: Product interpreter ---")
    print(f"  rules: {prod_validation.second.get_const()}")


# =============================================================================
# Main
# =============================================================================
async def run_async_examples(config: KittenConfig) -> None:
    await example_parallel_interpreter(config)
    await example_product_interpreter(config)


def main() -> None:
    config = KittenConfig.from_env()
    configure_logging(config)
    logger.info("running FreeApplicative walkthrough")

    print("=" * 60)
    print("FreeApplicative Walkthrough")
    print("=" * 60)

    example_plain_interpreter()
    asyncio.run(run_async_examples(config))
    example_logging_interpreter()

    print("\n" + "=" * 60)
    print("All assertions passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
