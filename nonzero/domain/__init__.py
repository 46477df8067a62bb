"""
Domain models and value objects.

Contains the non-zero scalar types NzInt, NzFloat, NzSign and the
failure kinds / Checked result shared by their fallible operations.
"""

from nonzero.domain.errors import (
    Checked,
    NzArithmeticError,
    NzFloatError,
    NzIntError,
)
from nonzero.domain.nz_float import NzFloat
from nonzero.domain.nz_int import NzInt
from nonzero.domain.nz_sign import NzSign

__all__ = [
    # Errors
    "Checked",
    "NzArithmeticError",
    "NzFloatError",
    "NzIntError",
    # Scalar types
    "NzFloat",
    "NzInt",
    "NzSign",
]
