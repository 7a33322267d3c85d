"""
Either walkthrough - making failure explicit in the return type.

In day-to-day programming it is common to write functions that can fail:
querying a service may hit a connection issue, or some unexpected JSON.
Raising exceptions is the usual answer, but nothing in a signature says
which exceptions a function raises, and composing raising functions makes
it hard to tell where a failure came from.

This walkthrough shows:
1. Right-biased map over Either
2. Exception style vs Either style for a parse/reciprocal/stringify chain
3. Enumerating errors as a small ADT and pattern matching on it
4. Wrapping per-module errors into an application-wide error
5. Bridging exception-raising code with catch_only / catch_non_fatal
6. Stack-safe loops with the Either monad's tail_rec_m

Either vs Validated: Either short-circuits on the first error, Validated
accumulates them (see traverse_example.py).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from kitten import Either, KittenConfig, Left, Right, configure_logging
from kitten.typeclasses import either_monad

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"-?[0-9]+")


# =============================================================================
# Example 1: Right-biased Either
# =============================================================================
def example_right_biased() -> None:
    """
    Either is right-biased: map and flat_map act on Right, and a Left
    passes through untouched.
    """
    right: Either[str, int] = Right(5)
    assert right.map(lambda x: x + 1) == Right(6)

    left: Either[str, int] = Left("Hello")
    assert left.map(lambda x: x + 1) == Left("Hello")

    # left_map is map for the Left side
    assert left.left_map(str.upper) == Left("HELLO")
    assert right.left_map(str.upper) == Right(5)

    print("\n--- Example 1: Right-biased Either ---")
    print(f"  Right(5).map(+1) = {right.map(lambda x: x + 1)}")
    print(f"  Left('Hello').map(+1) = {left.map(lambda x: x + 1)}")


# =============================================================================
# Example 2: Exception style vs Either style
# =============================================================================
class ExceptionStyle:
    """Parse a string, take the reciprocal, turn it back into a string."""

    @staticmethod
    def parse(s: str) -> int:
        if _INTEGER.fullmatch(s):
            return int(s)
        raise ValueError(f"{s} is not a valid integer.")

    @staticmethod
    def reciprocal(i: int) -> float:
        if i == 0:
            raise ZeroDivisionError("Cannot take reciprocal of 0.")
        return 1.0 / i

    @staticmethod
    def stringify(d: float) -> str:
        return str(d)


class EitherStyle:
    """The same chain with failure visible in every return type."""

    @staticmethod
    def parse(s: str) -> Either[Exception, int]:
        if _INTEGER.fullmatch(s):
            return Either.right(int(s))
        return Either.left(ValueError(f"{s} is not a valid integer."))

    @staticmethod
    def reciprocal(i: int) -> Either[Exception, float]:
        if i == 0:
            return Either.left(ZeroDivisionError("Cannot take reciprocal of 0."))
        return Either.right(1.0 / i)

    @staticmethod
    def stringify(d: float) -> str:
        return str(d)

    @classmethod
    def magic(cls, s: str) -> Either[Exception, str]:
        return cls.parse(s).flat_map(cls.reciprocal).map(cls.stringify)


def describe_exception_result(result: Either[Exception, str]) -> str:
    match result:
        case Left(ValueError()):
            return "not a number!"
        case Left(ZeroDivisionError()):
            return "can't take reciprocal of 0!"
        case Left(_):
            return "got unknown exception"
        case Right(s):
            return f"Got reciprocal: {s}"
    raise TypeError(f"Not an Either: {result!r}")


def example_exception_vs_either() -> None:
    """
    Composing with flat_map and map stops at the first Left. Matching on
    exception classes still needs a catch-all Left(_) arm, because the
    type Either[Exception, str] admits exceptions we never raise.
    """
    assert ExceptionStyle.stringify(ExceptionStyle.reciprocal(ExceptionStyle.parse("100"))) == "0.01"

    assert describe_exception_result(EitherStyle.magic("100")) == "Got reciprocal: 0.01"
    assert describe_exception_result(EitherStyle.magic("abc")) == "not a number!"
    assert describe_exception_result(EitherStyle.magic("0")) == "can't take reciprocal of 0!"

    print("\n--- Example 2: Exception style vs Either style ---")
    for s in ("100", "abc", "0"):
        print(f"  magic({s!r}) -> {describe_exception_result(EitherStyle.magic(s))}")


# =============================================================================
# Example 3: Enumerated errors
# =============================================================================
class Error:
    """Every failure the reciprocal module can produce."""


@dataclass(frozen=True)
class NotANumber(Error):
    string: str


@dataclass(frozen=True)
class NoZeroReciprocal(Error):
    pass


class EitherStyle2:
    @staticmethod
    def parse(s: str) -> Either[Error, int]:
        if _INTEGER.fullmatch(s):
            return Either.right(int(s))
        return Either.left(NotANumber(s))

    @staticmethod
    def reciprocal(i: int) -> Either[Error, float]:
        if i == 0:
            return Either.left(NoZeroReciprocal())
        return Either.right(1.0 / i)

    @staticmethod
    def stringify(d: float) -> str:
        return str(d)

    @classmethod
    def magic(cls, s: str) -> Either[Error, str]:
        return cls.parse(s).flat_map(cls.reciprocal).map(cls.stringify)


def describe_error_result(result: Either[Error, str]) -> str:
    match result:
        case Left(NotANumber(s)):
            return f"{s} is not a number!"
        case Left(NoZeroReciprocal()):
            return "can't take reciprocal of 0!"
        case Right(s):
            return f"Got reciprocal: {s}"
    raise TypeError(f"Unexpected result: {result!r}")


def example_enumerated_errors() -> None:
    """
    Instead of exception classes, enumerate what can go wrong. The match
    no longer needs an arm for errors the module never produces.
    """
    assert describe_error_result(EitherStyle2.magic("100")) == "Got reciprocal: 0.01"
    assert describe_error_result(EitherStyle2.magic("x1")) == "x1 is not a number!"
    assert EitherStyle2.magic("0") == Left(NoZeroReciprocal())

    print("\n--- Example 3: Enumerated errors ---")
    print(f"  magic('x1') = {EitherStyle2.magic('x1')}")


# =============================================================================
# Example 4: Either in the large
# =============================================================================
@dataclass(frozen=True)
class DatabaseError:
    table: str


@dataclass(frozen=True)
class DatabaseValue:
    user_id: int


@dataclass(frozen=True)
class ServiceError:
    status: int


@dataclass(frozen=True)
class ServiceValue:
    greeting: str


class AppError:
    """Application-wide error wrapping each module's own error type."""


@dataclass(frozen=True)
class AppDatabaseError(AppError):
    error: DatabaseError


@dataclass(frozen=True)
class AppServiceError(AppError):
    error: ServiceError


class Database:
    def __init__(self, rows: dict[str, int]) -> None:
        self._rows = rows

    def database_things(self, name: str) -> Either[DatabaseError, DatabaseValue]:
        if name not in self._rows:
            return Left(DatabaseError(table="users"))
        return Right(DatabaseValue(self._rows[name]))


class Service:
    def service_things(self, value: DatabaseValue) -> Either[ServiceError, ServiceValue]:
        if value.user_id < 0:
            return Left(ServiceError(status=403))
        return Right(ServiceValue(f"hello user {value.user_id}"))


def do_app(db: Database, service: Service, name: str) -> Either[AppError, ServiceValue]:
    return (
        db.database_things(name)
        .left_map(AppDatabaseError)
        .flat_map(lambda dv: service.service_things(dv).left_map(AppServiceError))
    )


def awesome(result: Either[AppError, ServiceValue]) -> str:
    match result:
        case Left(AppDatabaseError()):
            return "something in the database went wrong"
        case Left(AppServiceError()):
            return "something in the service went wrong"
        case Right(_):
            return "everything is alright!"
    raise TypeError(f"Unexpected result: {result!r}")


def example_either_in_the_large() -> None:
    """
    Each module keeps its own error type; the application lifts them into
    AppError with left_map and composes as usual. Callers can then act on
    whole classes of errors.
    """
    db = Database({"alice": 1, "mallory": -1})
    service = Service()

    assert awesome(do_app(db, service, "alice")) == "everything is alright!"
    assert awesome(do_app(db, service, "bob")) == "something in the database went wrong"
    assert awesome(do_app(db, service, "mallory")) == "something in the service went wrong"
    assert do_app(db, service, "mallory") == Left(AppServiceError(ServiceError(403)))

    print("\n--- Example 4: Either in the large ---")
    for name in ("alice", "bob", "mallory"):
        print(f"  {name}: {awesome(do_app(db, service, name))}")


# =============================================================================
# Example 5: Working with exception-raising code
# =============================================================================
def example_catching_exceptions() -> None:
    """
    Wrapping a raising call in try/except by hand gets tedious. catch_only
    captures the named exception types, catch_non_fatal captures any
    Exception. Anything else still propagates.
    """
    try:
        either1: Either[ValueError, int] = Either.right(int("abc"))
    except ValueError as exc:
        either1 = Either.left(exc)
    assert either1.is_left

    either2 = Either.catch_only(ValueError, lambda: int("abc"))
    assert isinstance(either2, Left)
    assert isinstance(either2.value, ValueError)

    either3 = Either.catch_non_fatal(lambda: int("abc"))
    assert either3.is_left

    assert Either.catch_only(ValueError, lambda: int("42")) == Right(42)

    try:
        Either.catch_only(ValueError, lambda: {}["missing"])
    except KeyError:
        pass
    else:
        raise AssertionError("catch_only must not capture unrelated exceptions")

    print("\n--- Example 5: Catching exceptions ---")
    print(f"  catch_only(ValueError, int('abc')) = {either2}")


# =============================================================================
# Example 6: Either monad and tail_rec_m
# =============================================================================
def example_tail_rec_m() -> None:
    """
    Because Either is right-biased it has a Monad instance with the left
    type fixed. tail_rec_m loops without growing the stack: Right(Left(a))
    continues, Right(Right(b)) finishes, Left(e) stops.
    """

    def count_down(n: int) -> Either[str, Either[int, str]]:
        if n < 0:
            return Left("negative start")
        if n == 0:
            return Right(Right("liftoff"))
        return Right(Left(n - 1))

    assert either_monad.tail_rec_m(100_000, count_down) == Right("liftoff")
    assert either_monad.tail_rec_m(-1, count_down) == Left("negative start")
    assert either_monad.flat_map(Right(3), lambda n: Right(n * 2)) == Right(6)

    print("\n--- Example 6: tail_rec_m ---")
    print(f"  count_down(100000) = {either_monad.tail_rec_m(100_000, count_down)}")


# =============================================================================
# Main
# =============================================================================
def main() -> None:
    configure_logging(KittenConfig.from_env())
    logger.info("running Either walkthrough")

    print("=" * 60)
    print("Either Walkthrough")
    print("=" * 60)

    example_right_biased()
    example_exception_vs_either()
    example_enumerated_errors()
    example_either_in_the_large()
    example_catching_exceptions()
    example_tail_rec_m()

    print("\n" + "=" * 60)
    print("All assertions passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
