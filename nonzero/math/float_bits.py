"""
Float Bits — работа с битовым представлением IEEE-754 binary64

Модуль даёт примитивы, необходимые для корректного упорядочивания и
хэширования float без NaN и без ±0.0:
- Конверсия float <-> 64-битный паттерн (знаковый int)
- Ключ полного порядка (эквивалент totalOrder из IEEE-754 2008)
- Проверка знакового бита (работает для ±inf и -0.0)
- Проверка исключённых значений (±0.0, NaN)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. total_order_key монотонен: -inf < отрицательные < -0.0 < +0.0 < положительные < +inf
2. Для значений без NaN и ±0.0 равенство float эквивалентно равенству битов
"""

import math
import struct
from typing import Final

# Маска всех битов, кроме знакового
_MAGNITUDE_MASK: Final[int] = 0x7FFF_FFFF_FFFF_FFFF


# =============================================================================
# БИТОВЫЙ ПАТТЕРН
# =============================================================================


def float_to_bits(value: float) -> int:
    """
    Битовый паттерн binary64, интерпретированный как знаковый i64.

    Examples:
        >>> float_to_bits(1.0)
        4607182418800017408
        >>> float_to_bits(-0.0) < 0
        True
    """
    return struct.unpack("<q", struct.pack("<d", value))[0]


def bits_to_float(bits: int) -> float:
    """Обратная конверсия: знаковый i64 паттерн -> float."""
    return struct.unpack("<d", struct.pack("<q", bits))[0]


def total_order_key(value: float) -> int:
    """
    Ключ полного порядка для float.

    Для отрицательных чисел инвертируются все биты кроме знакового,
    после чего знаковое сравнение int совпадает с порядком IEEE totalOrder.

    Args:
        value: Любой float (включая ±inf, ±0.0)

    Returns:
        int, сравнение которого задаёт strict total order

    Examples:
        >>> total_order_key(-0.0) < total_order_key(0.0)
        True
        >>> total_order_key(-math.inf) < total_order_key(-1.0)
        True
    """
    bits = float_to_bits(value)
    if bits < 0:
        bits ^= _MAGNITUDE_MASK
    return bits


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_sign_positive(value: float) -> bool:
    """
    Проверка знакового бита.

    В отличие от `value > 0`, корректно различает -0.0 и работает для ±inf.
    """
    return math.copysign(1.0, value) > 0


def is_excluded(value: float) -> bool:
    """
    Проверка, что значение запрещено для ненулевого float.

    Returns:
        True если value == ±0.0 или NaN
    """
    return value == 0.0 or math.isnan(value)
