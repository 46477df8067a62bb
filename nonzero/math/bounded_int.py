"""
Bounded Int — 64-битная знаковая арифметика с two's-complement семантикой

Python int не ограничен по разрядности, поэтому модуль явно моделирует
фиксированную ширину i64:
- Границы диапазона и проверка принадлежности
- Wraparound (переполнение по модулю 2**64, без насыщения и без исключения)
- Целочисленное деление с усечением к нулю (в отличие от `//`, который
  округляет к -inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой wrapping-операции лежит в [I64_MIN, I64_MAX]
2. trunc_div(a, b) — точное частное, усечённое к нулю; промежуточный float
   не используется
3. Все операции детерминированы и не имеют побочных эффектов
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА i64
# =============================================================================

I64_BITS: Final[int] = 64

# Минимальное представимое значение: -2**63
I64_MIN: Final[int] = -(1 << (I64_BITS - 1))

# Максимальное представимое значение: 2**63 - 1
I64_MAX: Final[int] = (1 << (I64_BITS - 1)) - 1

# Маска беззнакового 64-битного слова
U64_MASK: Final[int] = (1 << I64_BITS) - 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_i64(value: int) -> bool:
    """
    Проверка, что значение является int (не bool) в диапазоне i64.

    Args:
        value: Проверяемое значение

    Returns:
        True если I64_MIN <= value <= I64_MAX
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return I64_MIN <= value <= I64_MAX


def validate_i64(value: int, name: str) -> None:
    """
    Валидация сырого значения перед построением i64-типа.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне диапазона i64
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if not I64_MIN <= value <= I64_MAX:
        raise ValueError(f"{name} must be within [{I64_MIN}, {I64_MAX}], got {value}")


# =============================================================================
# WRAPPING АРИФМЕТИКА
# =============================================================================


def wrap_i64(value: int) -> int:
    """
    Приведение произвольного int к i64 по модулю 2**64.

    Эквивалент обрезания до младших 64 бит с последующей
    интерпретацией как знакового числа.

    Examples:
        >>> wrap_i64(I64_MAX + 1) == I64_MIN
        True
        >>> wrap_i64(-1)
        -1
        >>> wrap_i64(1 << 64)
        0
    """
    value &= U64_MASK
    if value > I64_MAX:
        value -= 1 << I64_BITS
    return value


def wrapping_add(a: int, b: int) -> int:
    """Сложение i64 с wraparound."""
    return wrap_i64(a + b)


def wrapping_sub(a: int, b: int) -> int:
    """Вычитание i64 с wraparound."""
    return wrap_i64(a - b)


def wrapping_mul(a: int, b: int) -> int:
    """Умножение i64 с wraparound."""
    return wrap_i64(a * b)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к -inf (-7 // 2 == -4), здесь требуется
    семантика фиксированной ширины (-7 / 2 == -3).

    Переполнение (I64_MIN / -1) НЕ обрабатывается: вызывающий код
    обязан отсечь этот случай до вызова.

    Args:
        a: Делимое
        b: Делитель (b != 0)

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(2, 7)
        0
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q
