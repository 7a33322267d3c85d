"""Free applicative programs and their interpreters."""

from kitten.free.applicative import FreeApplicative, Interpreter, Lift, Map2, Pure, lift, map_n, pure

__all__ = [
    "FreeApplicative",
    "Interpreter",
    "Pure",
    "Lift",
    "Map2",
    "lift",
    "pure",
    "map_n",
]
