"""
Numeric Normalizer — Приведение числовых входов к каноническому виду

Модуль принимает закрытый набор типов входа и приводит его к десятичной
строке (для to_wei) или к int произвольной точности (для from_wei):
- str: десятичная строка, опционально со знаком и точкой
- int / float: нативные числа
- Decimal и прочие numbers.Integral: объекты произвольной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool не является числом (InvalidNumberError)
2. NaN/Inf никогда не проходят нормализацию
3. Любой другой тип → InvalidNumberError с именем типа
"""

import math
import numbers
import re
from decimal import Decimal
from typing import Final, Union

from kapoio_unit.core.domain.errors import InvalidNumberError

# Закрытое объединение допустимых числовых входов
NumberLike = Union[str, int, float, Decimal, numbers.Integral]

# Строка числа: цифры и точки, опциональный минус в начале
NUMBER_STRING_RE: Final[re.Pattern[str]] = re.compile(r"-?[0-9.]+")

# Целое десятичное число со знаком
INTEGER_STRING_RE: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")

# Целое шестнадцатеричное число с префиксом 0x
HEX_STRING_RE: Final[re.Pattern[str]] = re.compile(r"(-?)0[xX]([0-9a-fA-F]+)")

# Окно модулей float, записываемых десятичной строкой без экспоненты:
# 1e-6 <= |x| < 1e21 (вне окна остаётся экспоненциальная запись)
FLOAT_PLAIN_MIN: Final[float] = 1e-6
FLOAT_PLAIN_MAX: Final[float] = 1e21


# =============================================================================
# ДЕСЯТИЧНАЯ СТРОКА
# =============================================================================


def number_to_string(value: NumberLike) -> str:
    """
    Приведение числа к десятичной строке.

    Args:
        value: Строка, int, float, Decimal или numbers.Integral

    Returns:
        Десятичная строка:
        - str возвращается без изменений (если проходит проверку)
        - int → str(value)
        - float → кратчайшая запись без экспоненты в окне
          FLOAT_PLAIN_MIN..FLOAT_PLAIN_MAX, иначе экспоненциальная (str)
        - Decimal → запись с фиксированной точкой без экспоненты
        - прочие numbers.Integral → десятичная запись int(value)

    Raises:
        InvalidNumberError: Строка не число, NaN/Inf, bool или чужой тип

    Examples:
        >>> number_to_string("-1.5")
        '-1.5'
        >>> number_to_string(42)
        '42'
        >>> number_to_string(Decimal("1E+3"))
        '1000'
    """
    if isinstance(value, str):
        if not NUMBER_STRING_RE.fullmatch(value):
            raise InvalidNumberError(value, "should be a number matching ^-?[0-9.]+$")
        return value

    if isinstance(value, bool):
        raise InvalidNumberError(value)

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumberError(value, "not a finite number")
        if value == 0 or FLOAT_PLAIN_MIN <= abs(value) < FLOAT_PLAIN_MAX:
            return format(Decimal(repr(value)), "f")
        return str(value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumberError(value, "not a finite number")
        return format(value, "f")

    if isinstance(value, numbers.Integral):
        return str(int(value))

    raise InvalidNumberError(value)


# =============================================================================
# ЦЕЛОЕ ПРОИЗВОЛЬНОЙ ТОЧНОСТИ
# =============================================================================


def to_big_int(value: NumberLike) -> int:
    """
    Приведение суммы в базовых единицах к int.

    В отличие от number_to_string, дробные значения не допускаются:
    сумма в wei всегда целая. Строки вида "0x1f" / "-0x1f" разбираются
    как шестнадцатеричные.

    Args:
        value: Целое значение в любом допустимом представлении

    Returns:
        int произвольной точности

    Raises:
        InvalidNumberError: Значение не целое или не число
    """
    if isinstance(value, str):
        hex_match = HEX_STRING_RE.fullmatch(value)
        if hex_match:
            sign, digits = hex_match.groups()
            result = int(digits, 16)
            return -result if sign else result
        if not INTEGER_STRING_RE.fullmatch(number_to_string(value)):
            raise InvalidNumberError(value, "not an integer")
        return int(value, 10)

    if isinstance(value, bool):
        raise InvalidNumberError(value)

    if isinstance(value, int):
        return value

    if isinstance(value, (float, Decimal)):
        # NaN/Inf → InvalidNumberError
        number_to_string(value)
        if value != int(value):
            raise InvalidNumberError(value, "not an integer")
        return int(value)

    if isinstance(value, numbers.Integral):
        return int(value)

    raise InvalidNumberError(value)
