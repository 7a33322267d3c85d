"""Typeclasses - Applicative instances, the Either monad and traverse."""

from kitten.typeclasses.applicative import (
    Applicative,
    ConstApplicative,
    EitherApplicative,
    KleisliApplicative,
    ProductApplicative,
    ReaderApplicative,
    ValidatedApplicative,
    either_applicative,
    kleisli_applicative,
    list_const_applicative,
    reader_applicative,
    validated_applicative,
)
from kitten.typeclasses.monad import EitherMonad, either_monad
from kitten.typeclasses.traverse import (
    await_result,
    sequence,
    sequence_async,
    traverse,
    traverse_async,
    traverse_either,
    traverse_validated,
)

__all__ = [
    "Applicative",
    "EitherApplicative",
    "ValidatedApplicative",
    "ConstApplicative",
    "ReaderApplicative",
    "KleisliApplicative",
    "ProductApplicative",
    "EitherMonad",
    # Instances
    "either_applicative",
    "validated_applicative",
    "reader_applicative",
    "kleisli_applicative",
    "list_const_applicative",
    "either_monad",
    # Traverse
    "traverse",
    "sequence",
    "traverse_either",
    "traverse_validated",
    "sequence_async",
    "traverse_async",
    "await_result",
]
