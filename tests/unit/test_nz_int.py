"""
Тесты для NzInt — ненулевого i64

Проверяет:
1. Конструирование (Pydantic, try_from, new) и отказ на 0
2. Checked add/sub/mul с wraparound и отказом на нулевом результате
3. Checked div: усечение, DivOverflow, ZeroResult
4. Checked neg/abs на I64_MIN
5. signum, равенство, порядок, хэш
6. Immutability (frozen=True) и JSON round trip одиночного скаляра
"""

import logging

import pytest
from pydantic import BaseModel, ValidationError

from nonzero.domain import NzArithmeticError, NzInt, NzIntError
from nonzero.math import I64_MAX, I64_MIN


def nz(raw: int) -> NzInt:
    """Короткий конструктор для тестов"""
    return NzInt.try_from(raw).unwrap()


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestNzIntConstruction:
    """Тесты конструкторов NzInt"""

    def test_pydantic_constructor(self) -> None:
        """NzInt(raw) через валидацию Pydantic"""
        assert NzInt(5).value == 5
        assert NzInt(-5).value == -5
        assert NzInt(I64_MIN).value == I64_MIN
        assert NzInt(I64_MAX).value == I64_MAX

    def test_pydantic_constructor_rejects_zero(self) -> None:
        """NzInt(0) → ValidationError с видом отказа"""
        with pytest.raises(ValidationError) as exc_info:
            NzInt(0)
        assert "ZeroResult" in str(exc_info.value)

    @pytest.mark.parametrize("raw", [True, 5.0, "5", I64_MAX + 1, I64_MIN - 1])
    def test_pydantic_constructor_rejects_non_i64(self, raw: object) -> None:
        """Strict int в диапазоне i64"""
        with pytest.raises(ValidationError):
            NzInt(raw)  # type: ignore[arg-type]

    def test_try_from_zero(self) -> None:
        """try_from(0) → ZERO_RESULT как значение, без исключения"""
        result = NzInt.try_from(0)
        assert result.is_err
        assert result.error is NzIntError.ZERO_RESULT

    @pytest.mark.parametrize("raw", [1, -1, 42, I64_MIN, I64_MAX])
    def test_try_from_roundtrip(self, raw: int) -> None:
        """Ненулевое значение проходит через value без изменений"""
        result = NzInt.try_from(raw)
        assert result.is_ok
        assert result.unwrap().value == raw
        assert int(result.unwrap()) == raw

    def test_try_from_contract_violations(self) -> None:
        """Неверный тип/диапазон — нарушение контракта, а не вид отказа"""
        with pytest.raises(TypeError):
            NzInt.try_from(True)
        with pytest.raises(TypeError):
            NzInt.try_from(1.5)  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            NzInt.try_from(I64_MAX + 1)

    def test_new_returns_none_on_zero(self) -> None:
        assert NzInt.new(0) is None
        assert NzInt.new(7) == NzInt(7)

    def test_from_nonzero(self) -> None:
        """Тотальная конверсия из уже доказанного значения"""
        original = NzInt(9)
        assert NzInt.from_nonzero(original) == original

    def test_model_copy_revalidates(self) -> None:
        """model_copy(update=...) не обходит инвариант"""
        value = NzInt(5)
        assert value.model_copy() == value
        assert value.model_copy(update={"root": -3}) == NzInt(-3)
        with pytest.raises(ValidationError, match="ZeroResult"):
            value.model_copy(update={"root": 0})

    def test_constants(self) -> None:
        assert NzInt.one().value == 1
        assert NzInt.neg_one().value == -1

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отказ логируется на уровне DEBUG"""
        with caplog.at_level(logging.DEBUG, logger="nonzero.domain.nz_int"):
            NzInt.try_from(0)
        assert "ZeroResult" in caplog.text


# =============================================================================
# CHECKED ADD / SUB / MUL
# =============================================================================


class TestNzIntAddSubMul:
    """Тесты для checked_add/sub/mul"""

    def test_add_basic(self) -> None:
        assert nz(2).checked_add(nz(3)).unwrap() == nz(5)
        assert nz(-2).checked_add(nz(-3)).unwrap() == nz(-5)

    def test_add_to_zero(self) -> None:
        """3 + (-3) → ZERO_RESULT"""
        result = nz(3).checked_add(nz(-3))
        assert result.error is NzIntError.ZERO_RESULT

    def test_add_overflow_wraps(self) -> None:
        """Переполнение не является ошибкой: I64_MAX + 1 → I64_MIN"""
        result = nz(I64_MAX).checked_add(nz(1))
        assert result.unwrap().value == I64_MIN

    def test_add_overflow_wraps_to_zero(self) -> None:
        """I64_MIN + I64_MIN заворачивается ровно в 0 → ZERO_RESULT"""
        result = nz(I64_MIN).checked_add(nz(I64_MIN))
        assert result.error is NzIntError.ZERO_RESULT

    def test_sub_basic(self) -> None:
        assert nz(10).checked_sub(nz(3)).unwrap() == nz(7)
        assert nz(3).checked_sub(nz(10)).unwrap() == nz(-7)

    def test_sub_to_zero(self) -> None:
        assert nz(5).checked_sub(nz(5)).error is NzIntError.ZERO_RESULT

    def test_sub_overflow_wraps(self) -> None:
        assert nz(I64_MIN).checked_sub(nz(1)).unwrap().value == I64_MAX
        assert nz(I64_MAX).checked_sub(nz(-1)).unwrap().value == I64_MIN

    def test_mul_basic(self) -> None:
        assert nz(3).checked_mul(nz(-4)).unwrap() == nz(-12)

    def test_mul_overflow_wraps(self) -> None:
        """I64_MAX * 2 = 2**64 - 2 → -2"""
        assert nz(I64_MAX).checked_mul(nz(2)).unwrap().value == -2

    def test_mul_wraps_to_zero(self) -> None:
        """2**32 * 2**32 = 2**64 → 0 после wraparound"""
        result = nz(2**32).checked_mul(nz(2**32))
        assert result.error is NzIntError.ZERO_RESULT

    def test_mul_min_by_minus_one_wraps(self) -> None:
        """Умножение не использует DivOverflow: I64_MIN * -1 → I64_MIN"""
        assert nz(I64_MIN).checked_mul(nz(-1)).unwrap().value == I64_MIN


# =============================================================================
# CHECKED DIV
# =============================================================================


class TestNzIntDiv:
    """Тесты для checked_div"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (3, 2, 1),
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (I64_MIN, 1, I64_MIN),
            (I64_MIN, 2, -(2**62)),
            (I64_MAX, -1, -I64_MAX),
        ],
    )
    def test_div_truncates(self, a: int, b: int, expected: int) -> None:
        """Усечение к нулю"""
        assert nz(a).checked_div(nz(b)).unwrap().value == expected

    @pytest.mark.parametrize("a, b", [(2, 7), (-2, 7), (1, I64_MIN), (I64_MAX, I64_MIN)])
    def test_div_truncates_to_zero(self, a: int, b: int) -> None:
        """|a| < |b| → ZERO_RESULT"""
        assert nz(a).checked_div(nz(b)).error is NzIntError.ZERO_RESULT

    def test_div_overflow(self) -> None:
        """I64_MIN / -1 → DIV_OVERFLOW"""
        result = nz(I64_MIN).checked_div(nz(-1))
        assert result.error is NzIntError.DIV_OVERFLOW

    def test_div_unwrap_raises(self) -> None:
        with pytest.raises(NzArithmeticError) as exc_info:
            nz(I64_MIN).checked_div(nz(-1)).unwrap()
        assert exc_info.value.kind is NzIntError.DIV_OVERFLOW


# =============================================================================
# CHECKED NEG / ABS, SIGNUM
# =============================================================================


class TestNzIntUnary:
    """Тесты для checked_neg/checked_abs/signum"""

    def test_neg(self) -> None:
        assert nz(5).checked_neg().unwrap() == nz(-5)
        assert nz(-5).checked_neg().unwrap() == nz(5)
        assert nz(I64_MAX).checked_neg().unwrap().value == I64_MIN + 1

    def test_neg_min_overflows(self) -> None:
        assert nz(I64_MIN).checked_neg().error is NzIntError.DIV_OVERFLOW

    def test_abs(self) -> None:
        assert nz(-5).checked_abs().unwrap() == nz(5)
        assert nz(5).checked_abs().unwrap() == nz(5)
        assert nz(I64_MIN + 1).checked_abs().unwrap().value == I64_MAX

    def test_abs_min_overflows(self) -> None:
        assert nz(I64_MIN).checked_abs().error is NzIntError.DIV_OVERFLOW

    def test_neg_neg_identity(self) -> None:
        for raw in (1, -1, 17, -17, I64_MAX, I64_MIN + 1):
            value = nz(raw)
            assert value.checked_neg().unwrap().checked_neg().unwrap() == value

    @pytest.mark.parametrize(
        "raw, expected", [(1, 1), (42, 1), (I64_MAX, 1), (-1, -1), (-42, -1), (I64_MIN, -1)]
    )
    def test_signum(self, raw: int, expected: int) -> None:
        assert nz(raw).signum().value == expected


# =============================================================================
# СРАВНЕНИЕ, ХЭШ, ОТОБРАЖЕНИЕ
# =============================================================================


class TestNzIntProtocols:
    """Тесты для равенства, порядка, хэша и отображения"""

    def test_equality(self) -> None:
        assert NzInt(5) == NzInt(5)
        assert NzInt(5) != NzInt(-5)

    def test_not_equal_to_raw_int(self) -> None:
        """NzInt не сравнивается с сырым int"""
        assert NzInt(5) != 5

    def test_ordering(self) -> None:
        values = [nz(3), nz(I64_MIN), nz(-1), nz(I64_MAX), nz(1)]
        assert [v.value for v in sorted(values)] == [I64_MIN, -1, 1, 3, I64_MAX]
        assert nz(1) < nz(2)
        assert nz(2) >= nz(2)
        assert nz(-2) <= nz(-1)
        assert nz(3) > nz(-3)

    def test_ordering_with_raw_int_raises(self) -> None:
        with pytest.raises(TypeError):
            _ = NzInt(1) < 2  # type: ignore[operator]

    def test_hash_consistent_with_eq(self) -> None:
        assert hash(NzInt(7)) == hash(NzInt(7))
        assert len({NzInt(1), NzInt(1), NzInt(2)}) == 2

    def test_repr_and_str(self) -> None:
        """Debug-отображение с именем типа, display — только значение"""
        assert repr(NzInt(5)) == "NzInt(5)"
        assert str(NzInt(-7)) == "-7"

    def test_immutable(self) -> None:
        """frozen=True: присваивание запрещено"""
        value = NzInt(5)
        with pytest.raises(ValidationError):
            value.root = 3  # type: ignore[misc]


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


class TestNzIntSerialization:
    """Тесты для JSON round trip одиночного скаляра"""

    def test_dump_json_is_bare_scalar(self) -> None:
        assert NzInt(42).model_dump_json() == "42"
        assert NzInt(I64_MIN).model_dump_json() == str(I64_MIN)

    def test_validate_json_roundtrip(self) -> None:
        for raw in (1, -1, I64_MIN, I64_MAX):
            value = NzInt(raw)
            assert NzInt.model_validate_json(value.model_dump_json()) == value

    def test_validate_json_rejects_zero(self) -> None:
        with pytest.raises(ValidationError):
            NzInt.model_validate_json("0")

    def test_as_model_field(self) -> None:
        """NzInt как поле другой Pydantic модели"""

        class Ratio(BaseModel):
            numerator: int
            denominator: NzInt

            model_config = {"frozen": True}

        ratio = Ratio(numerator=3, denominator=4)
        assert ratio.denominator == NzInt(4)
        assert ratio.model_dump() == {"numerator": 3, "denominator": 4}

        with pytest.raises(ValidationError):
            Ratio(numerator=3, denominator=0)
