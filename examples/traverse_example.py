"""
Traverse walkthrough - short-circuiting vs accumulating.

Effects are usually encoded as data types: Either for a computation that
may fail, Validated for one that collects every failure, a coroutine for
a value that arrives later. These effects show up in functions of a
single argument, e.g. parsing a string into an int.

traverse applies such a function ``f: A -> G[B]`` to every element of a
list and combines the results into one ``G[list[B]]``. What traverse does
as it walks the list depends entirely on the applicative behaviour of G.

This walkthrough shows:
1. Traversing with Either - the first failure wins
2. Traversing with Validated - every failure is collected
3. Turning a list of coroutines into one coroutine of a list
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass

from kitten import (
    Either,
    Invalid,
    KittenConfig,
    Left,
    Right,
    Valid,
    Validated,
    ValidatedNel,
    await_result,
    configure_logging,
    traverse_async,
    traverse_either,
    traverse_validated,
)

logger = logging.getLogger(__name__)


_INTEGER = re.compile(r"-?[0-9]+")


def to_int(s: str) -> int:
    """Parse a plain decimal integer. Unlike int(), rejects padding and underscores."""
    if _INTEGER.fullmatch(s) is None:
        raise ValueError(f"invalid literal for int() with base 10: {s!r}")
    return int(s)


def parse_int_either(s: str) -> Either[ValueError, int]:
    return Either.catch_only(ValueError, lambda: to_int(s))


def parse_int_validated(s: str) -> ValidatedNel[ValueError, int]:
    return Validated.catch_only(ValueError, lambda: to_int(s)).to_validated_nel()


# =============================================================================
# Example 1: Either - fail fast
# =============================================================================
def example_traverse_either() -> None:
    """
    The whole traversal fails at the first element that does not parse.
    Later failures are never reported.
    """
    assert traverse_either(["1", "2", "3"], parse_int_either) == Right([1, 2, 3])

    match traverse_either(["1", "foo!", "3"], parse_int_either):
        case Left(e):
            assert str(e) == "invalid literal for int() with base 10: 'foo!'"
        case other:
            raise AssertionError(f"expected Left, got {other!r}")

    # The error still refers to "foo!" even though "bar" fails too.
    match traverse_either(["1", "foo!", "bar"], parse_int_either):
        case Left(e):
            assert str(e) == "invalid literal for int() with base 10: 'foo!'"
        case other:
            raise AssertionError(f"expected Left, got {other!r}")

    print("\n--- Example 1: traverse with Either ---")
    print(f"  ['1', 'foo!', 'bar'] -> {traverse_either(['1', 'foo!', 'bar'], parse_int_either)}")


# =============================================================================
# Example 2: Validated - accumulate
# =============================================================================
def example_traverse_validated() -> None:
    """
    With Validated the traversal carries on past failures and collects
    every error, in element order.
    """
    assert traverse_validated(["1", "2", "3"], parse_int_validated) == Valid([1, 2, 3])

    # A single error, caused by the second value.
    match traverse_validated(["1", "foo!", "3"], parse_int_validated):
        case Invalid(errors):
            assert len(errors) == 1
        case other:
            raise AssertionError(f"expected Invalid, got {other!r}")

    # Two errors, caused by the second and third values.
    match traverse_validated(["1", "foo!", "bar"], parse_int_validated):
        case Invalid(errors):
            assert len(errors) == 2
            assert [str(e) for e in errors] == [
                "invalid literal for int() with base 10: 'foo!'",
                "invalid literal for int() with base 10: 'bar'",
            ]
        case other:
            raise AssertionError(f"expected Invalid, got {other!r}")

    print("\n--- Example 2: traverse with Validated ---")
    result = traverse_validated(["1", "foo!", "bar"], parse_int_validated)
    print(f"  ['1', 'foo!', 'bar'] -> {result.fold(lambda es: [str(e) for e in es], list)}")


# =============================================================================
# Example 3: Coroutines
# =============================================================================
@dataclass(frozen=True)
class User:
    name: str


@dataclass(frozen=True)
class Profile:
    name: str
    bio: str


async def get_user_profile(user: User) -> Profile:
    await asyncio.sleep(0.01)
    return Profile(name=user.name, bio=f"{user.name} likes functional programming")


async def example_traverse_async(config: KittenConfig) -> None:
    """
    Mapping get_user_profile over users gives a list of coroutines, which
    is awkward to work with. traverse_async turns it into one coroutine of
    a list, preserving input order. The wait is bounded so the walkthrough
    cannot hang.
    """
    users = [User("ada"), User("grace"), User("barbara")]

    profiles = await await_result(traverse_async(users, get_user_profile), config.await_timeout)
    assert [p.name for p in profiles] == ["ada", "grace", "barbara"]

    print("\n--- Example 3: traverse with coroutines ---")
    for profile in profiles:
        print(f"  {profile.name}: {profile.bio}")


# =============================================================================
# Main
# =============================================================================
def main() -> None:
    config = KittenConfig.from_env()
    configure_logging(config)
    logger.info("running Traverse walkthrough")

    print("=" * 60)
    print("Traverse Walkthrough")
    print("=" * 60)

    example_traverse_either()
    example_traverse_validated()
    asyncio.run(example_traverse_async(config))

    # In every case the behaviour of the traversal follows from the
    # applicative behaviour of the result type.
    print("\n" + "=" * 60)
    print("All assertions passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
