"""
Errors — Таксономия ошибок конверсии единиц

Все ошибки наследуются от UnitConversionError (подкласс ValueError), поэтому
вызывающий код может ловить либо конкретный класс, либо базовый.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки поднимаются синхронно в точке обнаружения нарушения
2. Никаких частичных результатов: вызов либо полностью успешен, либо падает
3. Молчаливое усечение точности запрещено (TooManyDecimalPlacesError)
"""

import json
from collections.abc import Mapping
from typing import Any


class UnitConversionError(ValueError):
    """Базовая ошибка модуля конверсии единиц."""

    pass


# =============================================================================
# ЕДИНИЦЫ
# =============================================================================


class UnknownUnitError(UnitConversionError):
    """
    Имя единицы не найдено в таблице единиц.

    Сообщение перечисляет всю таблицу, чтобы вызывающий код видел
    допустимые варианты.
    """

    def __init__(self, unit: Any, valid_units: Mapping[str, str]):
        self.unit = unit
        self.valid_units = dict(valid_units)
        super().__init__(
            f"the unit provided {unit} doesn't exist, please use one of the "
            f"following units {json.dumps(self.valid_units, indent=2)}"
        )


class ZeroScaleUnitError(UnitConversionError):
    """Единица с нулевым множителем (nokappa) не может быть делителем."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(
            f"the unit {unit} has a zero scale factor and cannot be used "
            f"to format a base amount"
        )


# =============================================================================
# ЧИСЛА И СУММЫ
# =============================================================================


class InvalidNumberError(UnitConversionError):
    """Нормализатор получил нечисловую строку или неподдерживаемый тип."""

    def __init__(self, value: Any, reason: str | None = None):
        self.value = value
        if reason is None:
            reason = f"type {type(value).__name__}"
        super().__init__(
            f"while converting number to string, invalid number value "
            f"'{value}' ({reason})"
        )


class InvalidAmountError(UnitConversionError):
    """Вырожденная сумма (одна десятичная точка)."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"while converting number {value} to wei, invalid value"
        )


class TooManyDecimalPointsError(UnitConversionError):
    """В сумме больше одной десятичной точки."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"while converting number {value} to wei, too many decimal points"
        )


class TooManyDecimalPlacesError(UnitConversionError):
    """
    Дробная часть длиннее, чем допускает единица.

    Это жёсткая защита от потери точности, а не автоусечение.
    """

    def __init__(self, value: Any, unit: str, max_digits: int):
        self.value = value
        self.unit = unit
        self.max_digits = max_digits
        super().__init__(
            f"while converting number {value} to wei, too many decimal places "
            f"(unit {unit} allows at most {max_digits})"
        )
