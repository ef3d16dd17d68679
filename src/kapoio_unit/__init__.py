"""
kapoio-unit — точная конверсия сумм между wei и именованными единицами.

Публичный API:
    - unit_map / UNIT_MAP: таблица единиц (только чтение)
    - get_value_of_unit: множитель единицы в wei
    - number_to_string: нормализация числа в десятичную строку
    - from_wei: wei → десятичная строка в единице
    - to_wei: десятичная строка в единице → wei
"""

__version__ = "1.0.0"

from kapoio_unit.converter import ConverterConfig, UnitConverter
from kapoio_unit.core.contracts import validate_unit_map
from kapoio_unit.core.domain import (
    BASE_UNIT,
    DEFAULT_UNIT,
    UNIT_MAP,
    ConversionOptions,
    InvalidAmountError,
    InvalidNumberError,
    TooManyDecimalPlacesError,
    TooManyDecimalPointsError,
    UnitConversionError,
    UnknownUnitError,
    ZeroScaleUnitError,
    get_value_of_unit,
    unit_decimal_digits,
)
from kapoio_unit.core.math import (
    from_base,
    from_wei,
    number_to_string,
    to_base,
    to_big_int,
    to_wei,
)

unit_map = UNIT_MAP

__all__ = [
    # Unit table
    "unit_map",
    "UNIT_MAP",
    "BASE_UNIT",
    "DEFAULT_UNIT",
    "get_value_of_unit",
    "unit_decimal_digits",
    "validate_unit_map",
    # Normalization
    "number_to_string",
    "to_big_int",
    # Conversion
    "from_wei",
    "to_wei",
    "from_base",
    "to_base",
    "ConversionOptions",
    # Configurable converter
    "ConverterConfig",
    "UnitConverter",
    # Errors
    "UnitConversionError",
    "UnknownUnitError",
    "ZeroScaleUnitError",
    "InvalidNumberError",
    "InvalidAmountError",
    "TooManyDecimalPointsError",
    "TooManyDecimalPlacesError",
]
