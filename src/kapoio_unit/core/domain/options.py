"""
ConversionOptions — Опции форматирования from_wei

Immutable Pydantic модель. Опции влияют только на строковое представление
результата, но не на арифметику.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field


class ConversionOptions(BaseModel):
    """
    Опции форматирования суммы.

    Неизвестные ключи игнорируются: из произвольного словаря опций
    читаются только pad и commify. Значение, не являющееся словарём
    (например True), означает отсутствие опций.
    """

    pad: bool = Field(
        False, description="Не отбрасывать хвостовые нули дробной части"
    )
    commify: bool = Field(
        False, description="Группировать целую часть запятыми по 3 цифры"
    )

    model_config = {"frozen": True, "extra": "ignore"}

    @classmethod
    def coerce(
        cls, options: "ConversionOptions | Mapping[str, Any] | None"
    ) -> "ConversionOptions":
        """
        Приведение входных опций к модели.

        Args:
            options: Модель, словарь или None (все опции выключены).
                Прочие значения трактуются как None

        Raises:
            pydantic.ValidationError: Если значения опций невалидны
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            return cls()
        return cls.model_validate(dict(options))
