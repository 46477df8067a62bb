"""
NzFloat — Ненулевой float (binary64) без NaN

Immutable Pydantic RootModel, оборачивающая одно значение float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value никогда не равно +0.0, -0.0 или NaN
2. +inf и -inf допустимы и являются полноправными элементами домена
3. Порядок — strict total order (через битовое представление)
4. Хэш выводится из битового паттерна; это корректно только потому, что
   ±0.0 и NaN исключены (иначе -0.0 == 0.0 имели бы разные хэши)

Checked-операции проверяют сырой IEEE-754 результат в порядке:
1. NaN (inf - inf, inf / inf) → NOT_A_NUMBER
2. ±0.0 (сокращение, underflow) → ZERO_RESULT
3. Иначе — успех (включая ±inf при переполнении)

Конструктор различает отказы: ±0.0 → ZERO_RESULT, NaN → NOT_A_NUMBER.
Формат обмена (NzFloat.from_json) проверяется контрактом nz_float.
"""

import logging
import math
from typing import Any, Mapping, Optional, Union

from pydantic import Field, RootModel, field_validator

from nonzero.contracts.validators import contract_for
from nonzero.domain.errors import Checked, NzFloatError
from nonzero.math.float_bits import float_to_bits, is_sign_positive, total_order_key

logger = logging.getLogger(__name__)


def _violation(raw: float) -> Optional[NzFloatError]:
    """Вид нарушения инварианта для сырого float, либо None."""
    if math.isnan(raw):
        return NzFloatError.NOT_A_NUMBER
    if raw == 0.0:
        return NzFloatError.ZERO_RESULT
    return None


class NzFloat(RootModel):
    """
    Ненулевой float без NaN.

    Равенство — обычное числовое. Порядок:
    -inf < отрицательные конечные < положительные конечные < +inf.

    Поле strict: принимаются float и int, bool и строки отклоняются.
    model_construct() pydantic инвариант не проверяет; model_copy(update=...)
    переопределён и валидирует результат.
    """

    root: float = Field(..., strict=True, description="Обёрнутое значение float (не ±0.0, не NaN)")

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @field_validator("root")
    @classmethod
    def validate_non_zero_non_nan(cls, v: float) -> float:
        """Проверка основного инварианта: не ±0.0 и не NaN"""
        kind = _violation(v)
        if kind is not None:
            raise ValueError(f"NzFloat value must be non-zero and not NaN ({kind.value})")
        return v

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def try_from(cls, raw: float) -> Checked["NzFloat", NzFloatError]:
        """
        Fallible-конверсия из сырого float.

        Args:
            raw: Сырое значение (float или int)

        Returns:
            Checked с NzFloat, либо:
            - ZERO_RESULT если raw == ±0.0
            - NOT_A_NUMBER если raw — NaN

        Raises:
            TypeError: Если raw не float/int (bool отклоняется)
            ValueError: Если int слишком велик для float
        """
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise TypeError(f"raw must be a float, got {type(raw).__name__}")

        try:
            raw = float(raw)
        except OverflowError as e:
            raise ValueError(f"raw is out of float range: {e}") from e
        kind = _violation(raw)
        if kind is not None:
            logger.debug("NzFloat.try_from rejected raw=%r: %s", raw, kind.value)
            return Checked.err(kind)
        return Checked.ok(cls._trusted(raw))

    @classmethod
    def new(cls, raw: float) -> Optional["NzFloat"]:
        """То же, что try_from, но отказ представлен как None."""
        return cls.try_from(raw).value

    @classmethod
    def from_nonzero(cls, value: "NzFloat") -> "NzFloat":
        """
        Тотальная конверсия из значения, инвариант которого уже доказан.

        Доказательством служит сам экземпляр NzFloat (отдельного типа
        «доказанно ненулевого» float в Python нет), повторной проверки нет.
        """
        return cls._trusted(value.root)

    @classmethod
    def _trusted(cls, raw: float) -> "NzFloat":
        """
        Конструктор без проверок.

        Предусловие: raw не ±0.0 и не NaN. Нарушение ломает порядок и хэш.
        """
        return cls.model_construct(raw)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "NzFloat":
        """
        Разбор одиночного скаляра формата обмена через контракт nz_float.

        Raises:
            json.JSONDecodeError: Если текст не является JSON
            jsonschema.ValidationError: Если скаляр нарушает контракт
                (0, -0.0, NaN, true, "3.5")
        """
        return cls.model_validate(contract_for("nz_float").decode(text))

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "NzFloat":
        """Копия; при update результат проходит полную валидацию."""
        copied = super().model_copy(update=update, deep=deep)
        if update:
            return type(self).model_validate(copied.root)
        return copied

    @classmethod
    def one(cls) -> "NzFloat":
        return cls._trusted(1.0)

    @classmethod
    def neg_one(cls) -> "NzFloat":
        return cls._trusted(-1.0)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def value(self) -> float:
        """Обёрнутый float (тотально)."""
        return self.root

    def __float__(self) -> float:
        return self.root

    # =========================================================================
    # CHECKED АРИФМЕТИКА
    # =========================================================================

    def checked_add(self, rhs: "NzFloat") -> Checked["NzFloat", NzFloatError]:
        """Сложение IEEE-754; NaN (inf + -inf) или ±0.0 отклоняются."""
        return _checked_from_raw("checked_add", self, rhs, self.root + rhs.root)

    def checked_sub(self, rhs: "NzFloat") -> Checked["NzFloat", NzFloatError]:
        return _checked_from_raw("checked_sub", self, rhs, self.root - rhs.root)

    def checked_mul(self, rhs: "NzFloat") -> Checked["NzFloat", NzFloatError]:
        """Умножение; underflow до ±0.0 даёт ZERO_RESULT."""
        return _checked_from_raw("checked_mul", self, rhs, self.root * rhs.root)

    def checked_div(self, rhs: "NzFloat") -> Checked["NzFloat", NzFloatError]:
        """
        Деление IEEE-754.

        rhs ненулевой по инварианту. Переполнение даёт ±inf, что допустимо.
        inf / inf → NOT_A_NUMBER, x / inf → ZERO_RESULT.
        """
        return _checked_from_raw("checked_div", self, rhs, self.root / rhs.root)

    def abs(self) -> "NzFloat":
        """Модуль: тотален, |x| ненулевой и не NaN для любого x из домена."""
        return NzFloat._trusted(abs(self.root))

    def signum(self) -> "NzFloat":
        """±1.0 по знаковому биту (определено и для ±inf)."""
        if is_sign_positive(self.root):
            return NzFloat.one()
        return NzFloat.neg_one()

    # =========================================================================
    # СРАВНЕНИЕ, ХЭШ, ОТОБРАЖЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NzFloat):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(float_to_bits(self.root))

    def __lt__(self, other: "NzFloat") -> bool:
        if not isinstance(other, NzFloat):
            return NotImplemented
        return total_order_key(self.root) < total_order_key(other.root)

    def __le__(self, other: "NzFloat") -> bool:
        if not isinstance(other, NzFloat):
            return NotImplemented
        return total_order_key(self.root) <= total_order_key(other.root)

    def __gt__(self, other: "NzFloat") -> bool:
        if not isinstance(other, NzFloat):
            return NotImplemented
        return total_order_key(self.root) > total_order_key(other.root)

    def __ge__(self, other: "NzFloat") -> bool:
        if not isinstance(other, NzFloat):
            return NotImplemented
        return total_order_key(self.root) >= total_order_key(other.root)

    def __repr__(self) -> str:
        return f"NzFloat({self.root!r})"

    def __str__(self) -> str:
        # -0 невозможен по инварианту
        return str(self.root)


def _checked_from_raw(
    op: str, lhs: NzFloat, rhs: NzFloat, raw: float
) -> Checked[NzFloat, NzFloatError]:
    """Общий хвост бинарных операций: сначала NaN, затем ноль."""
    kind = _violation(raw)
    if kind is not None:
        logger.debug("NzFloat.%s rejected %r, %r: %s", op, lhs.root, rhs.root, kind.value)
        return Checked.err(kind)
    return Checked.ok(NzFloat._trusted(raw))
