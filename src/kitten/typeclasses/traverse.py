"""Traverse - turn a sequence of effects inside out.

traverse applies ``f: A -> G[B]`` to every element of a sequence and
combines the results into a single ``G[list[B]]``. What "combine" means
is decided by the applicative for G:

    traverse_either(["1", "foo!", "bar"], parse)     -> Left(<first error>)
    traverse_validated(["1", "foo!", "bar"], parse)  -> Invalid(<both errors>)
"""

from __future__ import annotations

import asyncio
import logging
import operator
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from kitten.kernel import Either, Validated
from kitten.typeclasses.applicative import Applicative, ValidatedApplicative, either_applicative

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")

Combine = Callable[[Any, Any], Any]


def traverse(items: Iterable[A], f: Callable[[A], Any], applicative: Applicative) -> Any:
    """Apply f to each item and combine the effects left to right.

    Once an effect short-circuits (see Applicative.short_circuits) the
    remaining items are not visited. The collected effects are combined
    in one call to the applicative's tuple_n.

    Args:
        items: Input sequence
        f: Per-element function returning a value of the applicative
        applicative: Instance deciding how effects combine

    Returns:
        The applicative's value wrapping a list of results
    """
    effects = []
    for index, item in enumerate(items):
        effect = f(item)
        effects.append(effect)
        if applicative.short_circuits(effect):
            logger.debug("traverse short-circuited at element %d", index)
            break
    return applicative.map(applicative.tuple_n(*effects), list)


def sequence(items: Iterable[Any], applicative: Applicative) -> Any:
    """Flip ``list[G[A]]`` into ``G[list[A]]``."""
    return traverse(items, lambda fa: fa, applicative)


def traverse_either(items: Iterable[A], f: Callable[[A], Either[E, B]]) -> Either[E, list[B]]:
    """Traverse with fail-fast semantics: the first Left is the result."""
    return traverse(items, f, either_applicative)


def traverse_validated(
    items: Iterable[A],
    f: Callable[[A], Validated[E, B]],
    combine: Combine = operator.add,
) -> Validated[E, list[B]]:
    """Traverse accumulating every Invalid, in element order."""
    return traverse(items, f, ValidatedApplicative(combine))


async def sequence_async(awaitables: Iterable[Awaitable[A]]) -> list[A]:
    """Turn many awaitables into one awaitable of a list, preserving order."""
    pending = list(awaitables)
    logger.debug("sequencing %d awaitables", len(pending))
    return list(await asyncio.gather(*pending))


async def traverse_async(items: Iterable[A], f: Callable[[A], Awaitable[B]]) -> list[B]:
    """Apply an async function to every item and gather the results."""
    return await sequence_async(f(item) for item in items)


async def await_result(awaitable: Awaitable[A], timeout: float) -> A:
    """Wait for an awaitable with a fixed bound.

    Raises:
        TimeoutError: If the awaitable does not finish within timeout seconds.
    """
    return await asyncio.wait_for(awaitable, timeout)
