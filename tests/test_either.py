import pytest

from kitten import Either, Left, NoValueError, Right, Valid, Invalid


def test_map_acts_on_right() -> None:
    assert Right(5).map(lambda x: x + 1) == Right(6)


def test_map_passes_left_through() -> None:
    assert Left("Hello").map(lambda x: x + 1) == Left("Hello")


def test_flat_map_short_circuits() -> None:
    calls = []

    def step(x: int) -> Either[str, int]:
        calls.append(x)
        return Right(x * 2)

    assert Left("boom").flat_map(step) == Left("boom")
    assert calls == []
    assert Right(2).flat_map(step) == Right(4)
    assert calls == [2]


def test_left_map() -> None:
    assert Left("e").left_map(str.upper) == Left("E")
    assert Right(1).left_map(str.upper) == Right(1)


def test_fold() -> None:
    assert Right(3).fold(lambda e: -1, lambda v: v * 10) == 30
    assert Left("x").fold(lambda e: e + "!", lambda v: v) == "x!"


def test_left_and_right_are_not_equal() -> None:
    assert Left(1) != Right(1)
    assert Right(1) == Either.right(1)
    assert Left(1) == Either.left(1)


def test_get_on_left_raises_no_value_error() -> None:
    """get() on a Left raises and keeps the carried error."""
    with pytest.raises(NoValueError) as info:
        Left("missing").get()
    assert info.value.error == "missing"
    assert isinstance(info.value, ValueError)


def test_get_or_else_and_or_else() -> None:
    assert Right(1).get_or_else(0) == 1
    assert Left("e").get_or_else(0) == 0
    assert Left("e").or_else(Right(2)) == Right(2)
    assert Right(1).or_else(Right(2)) == Right(1)


def test_ensure() -> None:
    assert Right(4).ensure("odd", lambda n: n % 2 == 0) == Right(4)
    assert Right(3).ensure("odd", lambda n: n % 2 == 0) == Left("odd")
    assert Left("e").ensure("odd", lambda n: False) == Left("e")


def test_swap() -> None:
    assert Right(1).swap() == Left(1)
    assert Left("e").swap() == Right("e")


def test_to_validated() -> None:
    assert Right(1).to_validated() == Valid(1)
    assert Left("e").to_validated() == Invalid("e")


def test_is_left_is_right() -> None:
    assert Left(0).is_left and not Left(0).is_right
    assert Right(0).is_right and not Right(0).is_left


def test_catch_only_captures_named_exception() -> None:
    result = Either.catch_only(ValueError, lambda: int("abc"))
    assert isinstance(result, Left)
    assert isinstance(result.value, ValueError)
    assert Either.catch_only(ValueError, lambda: int("7")) == Right(7)


def test_catch_only_accepts_tuple_of_types() -> None:
    result = Either.catch_only((KeyError, ValueError), lambda: {}["k"])
    assert isinstance(result.value, KeyError)


def test_catch_only_propagates_other_exceptions() -> None:
    with pytest.raises(KeyError):
        Either.catch_only(ValueError, lambda: {}["k"])


def test_catch_non_fatal_does_not_capture_keyboard_interrupt() -> None:
    def interrupt() -> int:
        raise KeyboardInterrupt

    assert Either.catch_non_fatal(lambda: 1 // 0).is_left
    with pytest.raises(KeyboardInterrupt):
        Either.catch_non_fatal(interrupt)


def test_pattern_matching() -> None:
    def describe(e: Either[str, int]) -> str:
        match e:
            case Left(err):
                return f"error: {err}"
            case Right(value):
                return f"value: {value}"
        return "unreachable"

    assert describe(Right(1)) == "value: 1"
    assert describe(Left("bad")) == "error: bad"
