"""
NzSign — Знак/булево значение в кодировке ±1

Закрытое перечисление из двух значений:
- NEG = -1 (false)
- POS = +1 (true)

Логические связки определены прямо на ±1-представлении и тотальны.
Единственная частичная операция — from_i8: всё, кроме int -1 и +1, даёт None.

AND/OR — чистые комбинаторы значений, а не short-circuit управление:
оба операнда уже вычислены вызывающим кодом.
"""

from enum import Enum
from typing import Optional, Union

from nonzero.contracts.validators import contract_for


class NzSign(Enum):
    """Знак ±1, изоморфный bool"""

    NEG = -1
    POS = 1

    # =========================================================================
    # КОНВЕРСИЯ BOOL
    # =========================================================================

    @classmethod
    def from_bool(cls, b: bool) -> "NzSign":
        return cls.POS if b else cls.NEG

    def to_bool(self) -> bool:
        return self is NzSign.POS

    def is_true(self) -> bool:
        return self is NzSign.POS

    def is_false(self) -> bool:
        return self is NzSign.NEG

    def __bool__(self) -> bool:
        return self.is_true()

    # =========================================================================
    # ЛОГИЧЕСКИЕ СВЯЗКИ
    # =========================================================================

    def not_(self) -> "NzSign":
        """Логическое НЕ: смена варианта."""
        return NzSign.NEG if self.is_true() else NzSign.POS

    def and_(self, rhs: "NzSign") -> "NzSign":
        """(POS, POS) → POS; иначе NEG."""
        if self.is_false():
            return NzSign.NEG
        return rhs

    def or_(self, rhs: "NzSign") -> "NzSign":
        """(NEG, NEG) → NEG; иначе POS."""
        if self.is_true():
            return NzSign.POS
        return rhs

    def xor(self, rhs: "NzSign") -> "NzSign":
        """POS тогда и только тогда, когда операнды различны."""
        return NzSign.NEG if self is rhs else NzSign.POS

    def __invert__(self) -> "NzSign":
        return self.not_()

    def __and__(self, rhs: object) -> "NzSign":
        if not isinstance(rhs, NzSign):
            return NotImplemented
        return self.and_(rhs)

    def __or__(self, rhs: object) -> "NzSign":
        if not isinstance(rhs, NzSign):
            return NotImplemented
        return self.or_(rhs)

    def __xor__(self, rhs: object) -> "NzSign":
        if not isinstance(rhs, NzSign):
            return NotImplemented
        return self.xor(rhs)

    # =========================================================================
    # КОНВЕРСИЯ i8 (interchange)
    # =========================================================================

    def to_i8(self) -> int:
        """±1 как знаковый байт."""
        return self.value

    @classmethod
    def from_i8(cls, v: int) -> Optional["NzSign"]:
        """
        Частичная конверсия из знакового байта.

        Returns:
            POS для 1, NEG для -1, None для любого другого значения,
            включая bool и float (1.0 знаковым байтом не является)
        """
        if isinstance(v, bool) or not isinstance(v, int):
            return None
        if v == 1:
            return cls.POS
        if v == -1:
            return cls.NEG
        return None

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "NzSign":
        """
        Разбор формата обмена (-1 или 1) через контракт nz_sign.

        Raises:
            json.JSONDecodeError: Если текст не является JSON
            jsonschema.ValidationError: Если скаляр нарушает контракт
        """
        return cls(contract_for("nz_sign").decode(text))
