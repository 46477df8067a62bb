"""
Non-zero scalar types with checked arithmetic.

This package contains refined numeric types that can never hold zero
(NzInt, NzFloat) and a ±1 sign/boolean (NzSign), built on top of
fixed-width and IEEE-754 primitives from nonzero.math.
"""

from nonzero.domain import (
    Checked,
    NzArithmeticError,
    NzFloat,
    NzFloatError,
    NzInt,
    NzIntError,
    NzSign,
)

__all__ = [
    "Checked",
    "NzArithmeticError",
    "NzFloat",
    "NzFloatError",
    "NzInt",
    "NzIntError",
    "NzSign",
]

__version__ = "0.1.0"
