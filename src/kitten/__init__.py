from .config import KittenConfig, configure_logging
from .errors import EmptyListError, KittenError, NoValueError, UnhandledOperationError
from .free import FreeApplicative, lift
from .kernel import (
    Const,
    Either,
    Invalid,
    Kleisli,
    Left,
    NonEmptyList,
    Prod,
    Right,
    Valid,
    Validated,
    ValidatedNel,
)
from .typeclasses import (
    Applicative,
    await_result,
    sequence,
    sequence_async,
    traverse,
    traverse_async,
    traverse_either,
    traverse_validated,
)

__all__ = [
    # Data types
    "Either",
    "Left",
    "Right",
    "Validated",
    "Valid",
    "Invalid",
    "ValidatedNel",
    "NonEmptyList",
    "Const",
    "Prod",
    "Kleisli",
    # Typeclasses
    "Applicative",
    "traverse",
    "sequence",
    "traverse_either",
    "traverse_validated",
    "sequence_async",
    "traverse_async",
    "await_result",
    # Free
    "FreeApplicative",
    "lift",
    # Configuration
    "KittenConfig",
    "configure_logging",
    # Errors
    "KittenError",
    "NoValueError",
    "EmptyListError",
    "UnhandledOperationError",
]
