"""
Errors — Виды отказов и явный результат checked-операций

Ошибки являются значениями: каждая fallible-операция возвращает Checked,
который содержит ровно одно из двух — успешное значение или вид отказа.
Операции не бросают исключений для перечисленных ниже видов отказа.

Таксономия:
- ZeroResult:  результат равен нулю (int или ±0.0 для float)
- DivOverflow: результат непредставим в i64 (I64_MIN / -1, -I64_MIN)
- NotANumber:  результат float оказался NaN

Для вызывающего кода, предпочитающего исключения, Checked.unwrap()
поднимает NzArithmeticError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


# =============================================================================
# ВИДЫ ОТКАЗОВ
# =============================================================================


class NzIntError(str, Enum):
    """Виды отказов для NzInt"""

    ZERO_RESULT = "ZeroResult"
    DIV_OVERFLOW = "DivOverflow"


class NzFloatError(str, Enum):
    """Виды отказов для NzFloat"""

    ZERO_RESULT = "ZeroResult"
    NOT_A_NUMBER = "NotANumber"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NzArithmeticError(ArithmeticError):
    """
    Отказ checked-операции, превращённый в исключение через unwrap().

    Attributes:
        kind: Вид отказа (NzIntError или NzFloatError)
    """

    def __init__(self, kind: Enum) -> None:
        self.kind = kind
        super().__init__(f"checked operation failed: {kind.value}")


# =============================================================================
# CHECKED RESULT
# =============================================================================


@dataclass(frozen=True)
class Checked(Generic[T, E]):
    """
    Результат fallible-операции: значение ИЛИ вид отказа.

    Инвариант: ровно одно из полей value/error не None.
    Создаётся только через Checked.ok() / Checked.err().
    """

    value: Optional[T] = None
    error: Optional[E] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Checked must hold exactly one of value/error")

    @classmethod
    def ok(cls, value: T) -> "Checked[T, E]":
        return cls(value=value)

    @classmethod
    def err(cls, error: E) -> "Checked[T, E]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """
        Извлечение значения.

        Returns:
            Успешное значение

        Raises:
            NzArithmeticError: Если результат — отказ
        """
        if self.error is not None:
            raise NzArithmeticError(self.error)
        return self.value  # type: ignore[return-value]
