"""
NzInt — Ненулевое 64-битное знаковое целое

Immutable Pydantic RootModel, оборачивающая одно значение i64.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value != 0 для любого существующего экземпляра
2. I64_MIN <= value <= I64_MAX
3. Checked-арифметика никогда не создаёт ноль: отказ возвращается как значение

Арифметика (add/sub/mul) выполняется с wraparound по модулю 2**64: переполнение
само по себе НЕ является ошибкой. Отклоняется только результат, равный нулю
после wraparound. Деление и отрицание отклоняют непредставимые результаты
(DivOverflow).

Точки входа:
- NzInt(raw):           валидация Pydantic, ValidationError на 0
- NzInt.try_from(raw):  Checked[NzInt, NzIntError]
- NzInt.new(raw):       NzInt | None
- NzInt.from_json(text): формат обмена, через контракт nz_int
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import Field, RootModel, field_validator

from nonzero.contracts.validators import contract_for
from nonzero.domain.errors import Checked, NzIntError
from nonzero.math.bounded_int import (
    I64_MAX,
    I64_MIN,
    trunc_div,
    validate_i64,
    wrapping_add,
    wrapping_mul,
    wrapping_sub,
)

logger = logging.getLogger(__name__)


class NzInt(RootModel):
    """
    Ненулевое i64.

    Сравнение, порядок и хэш определены по обёрнутому целому
    (естественный порядок int, равные значения имеют равный хэш).

    model_construct() pydantic не выполняет валидацию и инвариант не
    проверяет; снаружи модуля используйте NzInt(raw), try_from или new.
    model_copy(update=...) переопределён и валидирует результат.
    """

    root: int = Field(
        ...,
        strict=True,
        ge=I64_MIN,
        le=I64_MAX,
        description="Обёрнутое значение i64 (никогда не 0)",
    )

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def validate_non_zero(cls, v: int) -> int:
        """Проверка основного инварианта: значение не равно нулю"""
        if v == 0:
            raise ValueError(f"NzInt value must be non-zero ({NzIntError.ZERO_RESULT.value})")
        return v

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def try_from(cls, raw: int) -> Checked["NzInt", NzIntError]:
        """
        Fallible-конверсия из сырого i64.

        Args:
            raw: Сырое значение (int в диапазоне i64)

        Returns:
            Checked с NzInt, либо ZERO_RESULT если raw == 0

        Raises:
            TypeError: Если raw не int
            ValueError: Если raw вне диапазона i64
        """
        validate_i64(raw, "raw")
        if raw == 0:
            logger.debug("NzInt.try_from rejected raw=0: %s", NzIntError.ZERO_RESULT.value)
            return Checked.err(NzIntError.ZERO_RESULT)
        return Checked.ok(cls._trusted(raw))

    @classmethod
    def new(cls, raw: int) -> Optional["NzInt"]:
        """То же, что try_from, но отказ представлен как None."""
        return cls.try_from(raw).value

    @classmethod
    def from_nonzero(cls, value: "NzInt") -> "NzInt":
        """
        Тотальная конверсия из значения, ненулевость которого уже доказана.

        Отдельного представления «доказанно ненулевого» i64 в Python нет:
        доказательством служит сам экземпляр NzInt, поэтому конверсия
        сводится к копированию без повторной проверки.
        """
        return cls._trusted(value.root)

    @classmethod
    def _trusted(cls, raw: int) -> "NzInt":
        """
        Конструктор без проверок.

        Предусловие (обязанность вызывающего кода): raw != 0 и raw в диапазоне i64.
        Нарушение ломает все инварианты типа. Используется только там, где
        ненулевость результата только что доказана локально.
        """
        return cls.model_construct(raw)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "NzInt":
        """
        Разбор одиночного скаляра формата обмена через контракт nz_int.

        Args:
            text: JSON-текст, например "5"

        Raises:
            json.JSONDecodeError: Если текст не является JSON
            jsonschema.ValidationError: Если скаляр нарушает контракт
                (0, 5.0, true, "5", вне диапазона i64)
        """
        return cls.model_validate(contract_for("nz_int").decode(text))

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "NzInt":
        """Копия; при update результат проходит полную валидацию."""
        copied = super().model_copy(update=update, deep=deep)
        if update:
            return type(self).model_validate(copied.root)
        return copied

    @classmethod
    def one(cls) -> "NzInt":
        return cls._trusted(1)

    @classmethod
    def neg_one(cls) -> "NzInt":
        return cls._trusted(-1)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def value(self) -> int:
        """Обёрнутое i64 (тотально)."""
        return self.root

    def __int__(self) -> int:
        return self.root

    # =========================================================================
    # CHECKED АРИФМЕТИКА
    # =========================================================================

    def checked_add(self, rhs: "NzInt") -> Checked["NzInt", NzIntError]:
        """
        Сложение с wraparound.

        Returns:
            Checked с (возможно wrapped) суммой, ZERO_RESULT если сумма == 0
        """
        return _non_zero_or_err("checked_add", self, rhs, wrapping_add(self.root, rhs.root))

    def checked_sub(self, rhs: "NzInt") -> Checked["NzInt", NzIntError]:
        """Вычитание с wraparound; ZERO_RESULT если разность == 0."""
        return _non_zero_or_err("checked_sub", self, rhs, wrapping_sub(self.root, rhs.root))

    def checked_mul(self, rhs: "NzInt") -> Checked["NzInt", NzIntError]:
        """
        Умножение с wraparound.

        Произведение двух ненулевых чисел может обнулиться только через
        wraparound (например, 2**32 * 2**32).
        """
        return _non_zero_or_err("checked_mul", self, rhs, wrapping_mul(self.root, rhs.root))

    def checked_div(self, rhs: "NzInt") -> Checked["NzInt", NzIntError]:
        """
        Деление с усечением к нулю.

        Делитель ненулевой по инварианту, деления на ноль не существует.
        Порядок проверок:
        1. self == I64_MIN и rhs == -1 → DIV_OVERFLOW
        2. Усечённое частное == 0 (например, 2 / 7) → ZERO_RESULT

        Returns:
            Checked с частным или видом отказа
        """
        a = self.root
        b = rhs.root
        if a == I64_MIN and b == -1:
            logger.debug("NzInt.checked_div rejected %d / %d: %s", a, b, NzIntError.DIV_OVERFLOW.value)
            return Checked.err(NzIntError.DIV_OVERFLOW)
        return _non_zero_or_err("checked_div", self, rhs, trunc_div(a, b))

    def checked_neg(self) -> Checked["NzInt", NzIntError]:
        """
        Отрицание.

        Отрицание ненулевого значения ненулевое, поэтому ZERO_RESULT невозможен.
        DIV_OVERFLOW для I64_MIN (-I64_MIN непредставимо).
        """
        if self.root == I64_MIN:
            logger.debug("NzInt.checked_neg rejected %d: %s", self.root, NzIntError.DIV_OVERFLOW.value)
            return Checked.err(NzIntError.DIV_OVERFLOW)
        return Checked.ok(NzInt._trusted(-self.root))

    def checked_abs(self) -> Checked["NzInt", NzIntError]:
        """Модуль; DIV_OVERFLOW для I64_MIN, как и у checked_neg."""
        if self.root == I64_MIN:
            logger.debug("NzInt.checked_abs rejected %d: %s", self.root, NzIntError.DIV_OVERFLOW.value)
            return Checked.err(NzIntError.DIV_OVERFLOW)
        return Checked.ok(NzInt._trusted(abs(self.root)))

    def signum(self) -> "NzInt":
        """Знак как NzInt: +1 или -1. Случай 0 → 0 невозможен по инварианту."""
        if self.root > 0:
            return NzInt.one()
        return NzInt.neg_one()

    # =========================================================================
    # СРАВНЕНИЕ, ХЭШ, ОТОБРАЖЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NzInt):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(self.root)

    def __lt__(self, other: "NzInt") -> bool:
        if not isinstance(other, NzInt):
            return NotImplemented
        return self.root < other.root

    def __le__(self, other: "NzInt") -> bool:
        if not isinstance(other, NzInt):
            return NotImplemented
        return self.root <= other.root

    def __gt__(self, other: "NzInt") -> bool:
        if not isinstance(other, NzInt):
            return NotImplemented
        return self.root > other.root

    def __ge__(self, other: "NzInt") -> bool:
        if not isinstance(other, NzInt):
            return NotImplemented
        return self.root >= other.root

    def __repr__(self) -> str:
        return f"NzInt({self.root})"

    def __str__(self) -> str:
        return str(self.root)


def _non_zero_or_err(op: str, lhs: NzInt, rhs: NzInt, raw: int) -> Checked[NzInt, NzIntError]:
    """Общий хвост бинарных операций: отклонение нулевого результата."""
    if raw == 0:
        logger.debug(
            "NzInt.%s rejected %d, %d: %s", op, lhs.root, rhs.root, NzIntError.ZERO_RESULT.value
        )
        return Checked.err(NzIntError.ZERO_RESULT)
    return Checked.ok(NzInt._trusted(raw))
