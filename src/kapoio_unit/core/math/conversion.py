"""
Conversion — Точная конверсия между базовой единицей и именованными единицами

Модуль переводит суммы между wei (целое произвольной точности) и
десятично-масштабированными единицами (kappa, gwei, ...) без float:
- from_base: int (wei) → десятичная строка в выбранной единице
- to_base: десятичная строка / число → int (wei)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика только на int (без потери точности)
2. Лишние дробные знаки → TooManyDecimalPlacesError (никакого усечения)
3. to_base(from_base(n, u, pad=True), u) == n для любой единицы с ненулевым множителем
4. from_base(-n, u) == "-" + from_base(n, u) для n > 0

ФОРМУЛЫ:
    from_base: whole = |amount| // base, fraction = |amount| % base
    to_base:   amount = whole * base + fraction_padded
"""

import logging
from collections.abc import Mapping
from typing import Any, Final

from kapoio_unit.core.domain.errors import (
    InvalidAmountError,
    InvalidNumberError,
    TooManyDecimalPlacesError,
    TooManyDecimalPointsError,
    ZeroScaleUnitError,
)
from kapoio_unit.core.domain.options import ConversionOptions
from kapoio_unit.core.domain.units import (
    get_value_of_unit,
    normalize_unit_name,
    unit_decimal_digits,
)
from kapoio_unit.core.math.normalizer import NumberLike, number_to_string, to_big_int

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Разделитель групп разрядов целой части (commify)
GROUPING_SEPARATOR: Final[str] = ","

# Размер группы разрядов
GROUPING_SIZE: Final[int] = 3

DECIMAL_POINT: Final[str] = "."

MINUS_SIGN: Final[str] = "-"


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def trim_fraction(fraction: str) -> str:
    """
    Отбрасывание хвостовых нулей дробной части.

    Оставляет строку до последней ненулевой цифры включительно,
    либо "0", если все цифры нулевые.

    Examples:
        >>> trim_fraction("500000")
        '5'
        >>> trim_fraction("050")
        '05'
        >>> trim_fraction("000")
        '0'
    """
    end = len(fraction)
    while end > 0 and fraction[end - 1] == "0":
        end -= 1
    return fraction[:end] or "0"


def commify(whole: str) -> str:
    """
    Группировка цифр целой части по 3 справа налево.

    Examples:
        >>> commify("1234567")
        '1,234,567'
        >>> commify("123")
        '123'
    """
    head = len(whole) % GROUPING_SIZE or GROUPING_SIZE
    groups = [whole[:head]]
    for start in range(head, len(whole), GROUPING_SIZE):
        groups.append(whole[start:start + GROUPING_SIZE])
    return GROUPING_SEPARATOR.join(groups)


# =============================================================================
# WEI → ЕДИНИЦА
# =============================================================================


def from_base(
    amount: NumberLike,
    unit: str | None = None,
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> str:
    """
    Конверсия суммы в wei в десятичную строку в единице unit.

    Args:
        amount: Сумма в wei (int, целая строка, 0x-строка, целый float/Decimal)
        unit: Целевая единица (по умолчанию kappa)
        options: pad (сохранить хвостовые нули), commify (группировка разрядов)

    Returns:
        Десятичная строка, например "1.5" или "-1,234.5"

    Raises:
        InvalidNumberError: amount не целое число
        UnknownUnitError: единица неизвестна
        ZeroScaleUnitError: множитель единицы равен 0 (nokappa)

    Examples:
        >>> from_base(10**18, "kappa")
        '1'
        >>> from_base(10**18, "kappa", {"pad": True})
        '1.000000000000000000'
        >>> from_base(1234500000000000000000, "kappa", {"commify": True})
        '1,234.5'
    """
    wei = to_big_int(amount)
    negative = wei < 0
    opts = ConversionOptions.coerce(options)

    base = get_value_of_unit(unit)
    base_length = unit_decimal_digits(unit)
    if base == 0:
        raise ZeroScaleUnitError(normalize_unit_name(unit))

    if negative:
        wei = -wei

    fraction = str(wei % base).zfill(base_length)
    if not opts.pad:
        fraction = trim_fraction(fraction)

    whole = str(wei // base)
    if opts.commify:
        whole = commify(whole)

    value = whole if fraction == "0" else f"{whole}{DECIMAL_POINT}{fraction}"
    if negative:
        value = f"{MINUS_SIGN}{value}"

    logger.debug("from_base(%s, %s) -> %s", amount, unit, value)
    return value


# =============================================================================
# ЕДИНИЦА → WEI
# =============================================================================


def _parse_digits(digits: str, original: Any) -> int:
    # Части суммы после split должны быть чистыми цифрами ("1e-07" не пройдёт)
    if not digits.isdigit() or not digits.isascii():
        raise InvalidNumberError(original, "not a plain decimal number")
    return int(digits, 10)


def to_base(amount: NumberLike, unit: str | None = None) -> int:
    """
    Конверсия десятичной суммы в единице unit в целое число wei.

    Args:
        amount: Десятичная строка или число (например "1.5", 2, Decimal("0.1"))
        unit: Исходная единица (по умолчанию kappa)

    Returns:
        Сумма в wei (int)

    Raises:
        InvalidNumberError: amount не число
        UnknownUnitError: единица неизвестна
        InvalidAmountError: amount == "."
        TooManyDecimalPointsError: больше одной точки
        TooManyDecimalPlacesError: дробных знаков больше, чем у единицы

    Examples:
        >>> to_base("1.5", "kappa")
        1500000000000000000
        >>> to_base("-0.000000001", "kappa")
        -1000000000
    """
    kappa = number_to_string(amount)
    base = get_value_of_unit(unit)
    base_length = unit_decimal_digits(unit)

    negative = kappa.startswith(MINUS_SIGN)
    if negative:
        kappa = kappa[len(MINUS_SIGN):]

    if kappa == DECIMAL_POINT:
        raise InvalidAmountError(amount)

    comps = kappa.split(DECIMAL_POINT)
    if len(comps) > 2:
        raise TooManyDecimalPointsError(amount)

    whole = comps[0] or "0"
    fraction = (comps[1] if len(comps) == 2 else "") or "0"

    if len(fraction) > base_length:
        raise TooManyDecimalPlacesError(
            amount, normalize_unit_name(unit), base_length
        )

    fraction = fraction.ljust(base_length, "0")

    wei = _parse_digits(whole, amount) * base + _parse_digits(fraction, amount)
    if negative:
        wei = -wei

    logger.debug("to_base(%s, %s) -> %d", amount, unit, wei)
    return wei


# =============================================================================
# ПУБЛИЧНЫЕ АЛИАСЫ
# =============================================================================

from_wei = from_base
to_wei = to_base
