"""UnitConverter — конверсия с настраиваемой единицей по умолчанию.

Обёртка над from_base / to_base для вызывающего кода, которому нужна
другая единица отображения по умолчанию (например gwei для комиссий)
или постоянные опции форматирования.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kapoio_unit.core.domain.options import ConversionOptions
from kapoio_unit.core.domain.units import (
    DEFAULT_UNIT,
    get_value_of_unit,
    normalize_unit_name,
)
from kapoio_unit.core.math.conversion import from_base, to_base
from kapoio_unit.core.math.normalizer import NumberLike

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация UnitConverter.

    default_unit проверяется по таблице единиц при создании
    (UnknownUnitError для неизвестного имени).
    """

    default_unit: str = DEFAULT_UNIT
    default_options: ConversionOptions = field(default_factory=ConversionOptions)

    def __post_init__(self) -> None:
        normalize_unit_name(self.default_unit)


# =============================================================================
# CONVERTER
# =============================================================================


class UnitConverter:
    """Конвертер сумм с единицей и опциями по умолчанию из конфигурации.

    Явно переданные unit / options имеют приоритет над конфигурацией.
    Опции из вызова заменяют default_options целиком, а не сливаются с ними.
    """

    def __init__(self, config: ConverterConfig | None = None):
        """Инициализация конвертера.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ConverterConfig()

    def _unit(self, unit: str | None) -> str:
        return unit or self.config.default_unit

    def _options(
        self, options: ConversionOptions | Mapping[str, Any] | None
    ) -> ConversionOptions:
        if options is None:
            return self.config.default_options
        return ConversionOptions.coerce(options)

    def get_value_of_unit(self, unit: str | None = None) -> int:
        """Множитель единицы в wei."""
        return get_value_of_unit(self._unit(unit))

    def from_wei(
        self,
        amount: NumberLike,
        unit: str | None = None,
        options: ConversionOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """wei → десятичная строка в единице unit (или default_unit)."""
        return from_base(amount, self._unit(unit), self._options(options))

    def to_wei(self, amount: NumberLike, unit: str | None = None) -> int:
        """Десятичная сумма в единице unit (или default_unit) → wei."""
        return to_base(amount, self._unit(unit))

    def convert(
        self,
        amount: NumberLike,
        from_unit: str | None = None,
        to_unit: str | None = None,
        options: ConversionOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """
        Конверсия суммы между двумя именованными единицами через wei.

        Args:
            amount: Десятичная сумма в from_unit
            from_unit: Исходная единица (по умолчанию default_unit)
            to_unit: Целевая единица (по умолчанию default_unit)
            options: Опции форматирования результата

        Returns:
            Десятичная строка в to_unit

        Raises:
            UnitConversionError: любая ошибка to_wei / from_wei

        Examples:
            >>> UnitConverter().convert("1.5", "kappa", "gwei")
            '1500000000'
        """
        wei = self.to_wei(amount, from_unit)
        result = self.from_wei(wei, to_unit, options)
        logger.debug(
            "convert(%s, %s -> %s) -> %s",
            amount,
            self._unit(from_unit),
            self._unit(to_unit),
            result,
        )
        return result
