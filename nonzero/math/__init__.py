"""
Math modules для nonzero

Примитивы фиксированной ширины и IEEE-754, на которых построены доменные типы.
"""

# Bounded Int (i64, two's complement)
from nonzero.math.bounded_int import (
    # Range constants
    I64_BITS,
    I64_MAX,
    I64_MIN,
    U64_MASK,
    # Checks
    is_i64,
    validate_i64,
    # Wrapping arithmetic
    wrap_i64,
    wrapping_add,
    wrapping_mul,
    wrapping_sub,
    # Division
    trunc_div,
)

# Float Bits (IEEE-754 binary64)
from nonzero.math.float_bits import (
    bits_to_float,
    float_to_bits,
    is_excluded,
    is_sign_positive,
    total_order_key,
)

__all__ = [
    # Bounded Int — Range constants
    "I64_BITS",
    "I64_MAX",
    "I64_MIN",
    "U64_MASK",
    # Bounded Int — Checks
    "is_i64",
    "validate_i64",
    # Bounded Int — Wrapping arithmetic
    "wrap_i64",
    "wrapping_add",
    "wrapping_mul",
    "wrapping_sub",
    # Bounded Int — Division
    "trunc_div",
    # Float Bits
    "bits_to_float",
    "float_to_bits",
    "is_excluded",
    "is_sign_positive",
    "total_order_key",
]
