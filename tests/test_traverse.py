import asyncio

import pytest

from kitten import (
    Const,
    Invalid,
    Kleisli,
    Left,
    NonEmptyList,
    Right,
    Valid,
    await_result,
    sequence,
    sequence_async,
    traverse,
    traverse_async,
    traverse_either,
    traverse_validated,
)
from kitten.typeclasses import either_applicative, kleisli_applicative, list_const_applicative, reader_applicative
from fakes import CountingParser, parse_int_either, parse_int_validated


def test_traverse_either_all_valid() -> None:
    assert traverse_either(["1", "2", "3"], parse_int_either) == Right([1, 2, 3])


def test_traverse_either_single_failure() -> None:
    result = traverse_either(["1", "foo!", "3"], parse_int_either)
    assert isinstance(result, Left)
    assert "'foo!'" in str(result.value)


def test_traverse_either_reports_only_first_failure() -> None:
    result = traverse_either(["1", "foo!", "bar"], parse_int_either)
    assert isinstance(result, Left)
    assert "'foo!'" in str(result.value)
    assert "bar" not in str(result.value)


def test_traverse_either_stops_calling_after_first_left() -> None:
    parser = CountingParser(parse_int_either)
    traverse_either(["1", "foo!", "bar", "4"], parser)
    assert parser.seen == ["1", "foo!"]


def test_traverse_validated_all_valid() -> None:
    assert traverse_validated(["1", "2", "3"], parse_int_validated) == Valid([1, 2, 3])


def test_traverse_validated_single_failure() -> None:
    result = traverse_validated(["1", "foo!", "3"], parse_int_validated)
    assert isinstance(result, Invalid)
    assert len(result.error) == 1


def test_traverse_validated_accumulates_in_element_order() -> None:
    parser = CountingParser(parse_int_validated)
    result = traverse_validated(["1", "foo!", "bar"], parser)
    assert isinstance(result, Invalid)
    assert len(result.error) == 2
    messages = [str(e) for e in result.error]
    assert "'foo!'" in messages[0]
    assert "'bar'" in messages[1]
    assert parser.seen == ["1", "foo!", "bar"]


def test_traverse_validated_with_list_errors() -> None:
    def check(n: int):
        return Valid(n) if n > 0 else Invalid([f"{n} is not positive"])

    assert traverse_validated([1, -2, 0], check) == Invalid(["-2 is not positive", "0 is not positive"])


def test_traverse_empty_input() -> None:
    assert traverse_either([], parse_int_either) == Right([])
    assert traverse_validated([], parse_int_validated) == Valid([])


def test_sequence_either() -> None:
    assert sequence([Right(1), Right(2)], either_applicative) == Right([1, 2])
    assert sequence([Right(1), Left("a"), Left("b")], either_applicative) == Left("a")


def test_traverse_reader() -> None:
    readers = traverse([1, 2, 3], lambda n: (lambda s: s * n), reader_applicative)
    assert readers("ab") == ["ab", "abab", "ababab"]


def test_traverse_reader_over_many_items() -> None:
    readers = traverse(range(5000), lambda n: (lambda offset: n + offset), reader_applicative)
    result = readers(1)
    assert len(result) == 5000
    assert result[0] == 1
    assert result[-1] == 5000


def test_traverse_kleisli_over_many_items() -> None:
    def scale(n: int) -> Kleisli:
        async def run(factor: int) -> int:
            return n * factor

        return Kleisli(run)

    gathered = traverse(range(3000), scale, kleisli_applicative)
    result = asyncio.run(gathered(2))
    assert result[:3] == [0, 2, 4]
    assert len(result) == 3000


def test_traverse_either_over_many_items() -> None:
    assert traverse_either([str(n) for n in range(5000)], parse_int_either) == Right(list(range(5000)))


def test_traverse_const_collects_without_values() -> None:
    result = traverse(["a", "b"], lambda s: Const([s.upper()]), list_const_applicative)
    assert result.get_const() == ["A", "B"]


def test_accumulated_errors_are_non_empty_list() -> None:
    result = traverse_validated(["x"], parse_int_validated)
    assert isinstance(result.error, NonEmptyList)


def test_sequence_async_preserves_order() -> None:
    async def delayed(value: int, delay: float) -> int:
        await asyncio.sleep(delay)
        return value

    async def run():
        return await sequence_async([delayed(1, 0.03), delayed(2, 0.0), delayed(3, 0.01)])

    assert asyncio.run(run()) == [1, 2, 3]


def test_traverse_async() -> None:
    async def double(n: int) -> int:
        await asyncio.sleep(0)
        return n * 2

    assert asyncio.run(traverse_async([1, 2, 3], double)) == [2, 4, 6]


def test_await_result_times_out() -> None:
    async def run():
        await await_result(asyncio.sleep(1.0), timeout=0.01)

    with pytest.raises(TimeoutError):
        asyncio.run(run())


def test_await_result_within_bound() -> None:
    async def quick() -> str:
        return "done"

    assert asyncio.run(await_result(quick(), timeout=1.0)) == "done"
