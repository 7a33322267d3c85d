"""Kernel layer - immutable data types with no typeclass machinery."""

from kitten.kernel.const import Const
from kitten.kernel.either import Either, Left, Right
from kitten.kernel.nel import NonEmptyList
from kitten.kernel.carriers import Kleisli, Prod
from kitten.kernel.validated import Invalid, Valid, Validated, ValidatedNel

__all__ = [
    "Either",
    "Left",
    "Right",
    "Validated",
    "Valid",
    "Invalid",
    "ValidatedNel",
    "NonEmptyList",
    # Carriers
    "Const",
    "Prod",
    "Kleisli",
]
