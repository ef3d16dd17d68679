"""
Domain models and value objects.

Contains the unit table, conversion options and the error taxonomy.
"""

from kapoio_unit.core.domain.errors import (
    InvalidAmountError,
    InvalidNumberError,
    TooManyDecimalPlacesError,
    TooManyDecimalPointsError,
    UnitConversionError,
    UnknownUnitError,
    ZeroScaleUnitError,
)
from kapoio_unit.core.domain.options import ConversionOptions
from kapoio_unit.core.domain.units import (
    BASE_UNIT,
    DEFAULT_UNIT,
    MIN_DECIMAL_DIGITS,
    UNIT_MAP,
    get_value_of_unit,
    normalize_unit_name,
    unit_decimal_digits,
)

__all__ = [
    # Units module
    "BASE_UNIT",
    "DEFAULT_UNIT",
    "MIN_DECIMAL_DIGITS",
    "UNIT_MAP",
    "get_value_of_unit",
    "normalize_unit_name",
    "unit_decimal_digits",
    # Options model
    "ConversionOptions",
    # Errors
    "UnitConversionError",
    "UnknownUnitError",
    "ZeroScaleUnitError",
    "InvalidNumberError",
    "InvalidAmountError",
    "TooManyDecimalPointsError",
    "TooManyDecimalPlacesError",
]
