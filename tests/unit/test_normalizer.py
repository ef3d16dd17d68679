"""
Тесты для Numeric Normalizer

Покрытие:
- number_to_string: str / int / float / Decimal / чужие типы
- to_big_int: целые представления, hex-строки, дробные значения
- NaN/Inf и bool отклоняются
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from kapoio_unit.core.domain.errors import InvalidNumberError
from kapoio_unit.core.math.normalizer import number_to_string, to_big_int


# =============================================================================
# number_to_string
# =============================================================================


class TestNumberToStringStrings:
    """Строковый вход"""

    def test_valid_strings_unchanged(self) -> None:
        """Валидные строки возвращаются без изменений"""
        assert number_to_string("1") == "1"
        assert number_to_string("-1.5") == "-1.5"
        assert number_to_string(".5") == ".5"
        assert number_to_string("1.") == "1."
        assert number_to_string("1.2.3") == "1.2.3"
        assert number_to_string(".") == "."

    @pytest.mark.parametrize("value", ["", "-", "abc", "1e5", "1,000", " 1", "1 ", "+1", "--1", "0x10"])
    def test_invalid_strings_raise(self, value: str) -> None:
        """Нечисловые строки → InvalidNumberError"""
        with pytest.raises(InvalidNumberError, match="invalid number value"):
            number_to_string(value)


class TestNumberToStringNumbers:
    """Нативные числа и объекты произвольной точности"""

    def test_int(self) -> None:
        """int → десятичная запись"""
        assert number_to_string(0) == "0"
        assert number_to_string(-42) == "-42"
        assert number_to_string(10**40) == "1" + "0" * 40

    def test_float(self) -> None:
        """float → кратчайшая десятичная запись"""
        assert number_to_string(1.5) == "1.5"
        assert number_to_string(0.1) == "0.1"
        assert number_to_string(0.0) == "0.0"

    def test_float_plain_window(self) -> None:
        """1e-6 <= |x| < 1e21 записывается без экспоненты"""
        assert number_to_string(0.00001) == "0.00001"
        assert number_to_string(-0.00001) == "-0.00001"
        assert number_to_string(1e-6) == "0.000001"
        assert number_to_string(1e16) == "10000000000000000"
        assert number_to_string(1e20) == "100000000000000000000"

    def test_float_outside_plain_window(self) -> None:
        """Вне окна остаётся экспоненциальная запись"""
        assert number_to_string(1e-07) == "1e-07"
        assert number_to_string(1e21) == "1e+21"

    def test_decimal_fixed_point(self) -> None:
        """Decimal → запись с фиксированной точкой"""
        assert number_to_string(Decimal("1.50")) == "1.50"
        assert number_to_string(Decimal("1E+3")) == "1000"
        assert number_to_string(Decimal("1E-20")) == "0." + "0" * 19 + "1"
        assert number_to_string(Decimal("-0.25")) == "-0.25"

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity")],
    )
    def test_non_finite_raise(self, value) -> None:
        """NaN/Inf → InvalidNumberError"""
        with pytest.raises(InvalidNumberError, match="not a finite number"):
            number_to_string(value)

    def test_bool_rejected(self) -> None:
        """bool не является числом"""
        with pytest.raises(InvalidNumberError, match="bool"):
            number_to_string(True)

    @pytest.mark.parametrize("value", [None, [1], {"a": 1}, Fraction(1, 2), b"1"])
    def test_unsupported_types_raise(self, value) -> None:
        """Чужие типы → InvalidNumberError с именем типа"""
        with pytest.raises(InvalidNumberError, match=type(value).__name__):
            number_to_string(value)


# =============================================================================
# to_big_int
# =============================================================================


class TestToBigInt:
    """Тесты для to_big_int"""

    def test_int_passthrough(self) -> None:
        """int возвращается как есть"""
        assert to_big_int(0) == 0
        assert to_big_int(-5) == -5
        assert to_big_int(10**50) == 10**50

    def test_decimal_strings(self) -> None:
        """Целые десятичные строки"""
        assert to_big_int("123") == 123
        assert to_big_int("-123") == -123
        assert to_big_int("000123") == 123

    def test_hex_strings(self) -> None:
        """0x-строки разбираются как шестнадцатеричные"""
        assert to_big_int("0x10") == 16
        assert to_big_int("0xDE0B6B3A7640000") == 10**18
        assert to_big_int("-0x1") == -1

    def test_integral_float_and_decimal(self) -> None:
        """Целые float/Decimal допустимы"""
        assert to_big_int(2.0) == 2
        assert to_big_int(Decimal("1E+3")) == 1000
        assert to_big_int(Decimal("-7.000")) == -7

    @pytest.mark.parametrize("value", ["1.5", "1.", ".", 1.5, Decimal("0.1")])
    def test_fractional_values_raise(self, value) -> None:
        """Дробные суммы в wei недопустимы"""
        with pytest.raises(InvalidNumberError, match="not an integer"):
            to_big_int(value)

    @pytest.mark.parametrize("value", ["abc", "", "0x", "1e5", True, None, float("nan")])
    def test_invalid_values_raise(self, value) -> None:
        """Нечисловые значения → InvalidNumberError"""
        with pytest.raises(InvalidNumberError):
            to_big_int(value)
