"""
Core math modules для kapoio-unit

Нормализация числовых входов и точная целочисленная конверсия единиц.
"""

# Numeric Normalizer
from kapoio_unit.core.math.normalizer import (
    NumberLike,
    number_to_string,
    to_big_int,
)

# Conversion Engine
from kapoio_unit.core.math.conversion import (
    GROUPING_SEPARATOR,
    commify,
    from_base,
    from_wei,
    to_base,
    to_wei,
    trim_fraction,
)

__all__ = [
    # Numeric Normalizer
    "NumberLike",
    "number_to_string",
    "to_big_int",
    # Conversion — Constants
    "GROUPING_SEPARATOR",
    # Conversion — Formatting
    "commify",
    "trim_fraction",
    # Conversion — Functions
    "from_base",
    "from_wei",
    "to_base",
    "to_wei",
]
