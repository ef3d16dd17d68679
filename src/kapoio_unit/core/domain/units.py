"""
Units — Централизованная таблица единиц и резолвер множителей

Единственный допустимый способ получить множитель единицы относительно
базовой единицы (wei). Все множители — степени 10, записанные десятичной
строкой ("1" и k нулей), либо "0" для nokappa.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица неизменяема (MappingProxyType) и проверяется контрактом при импорте
2. Имя единицы приводится к нижнему регистру ДО поиска
3. Имя не указано → DEFAULT_UNIT (kappa, 18 знаков)
4. Количество дробных знаков = len(множитель) - 1, но не меньше 1

ИЗВЕСТНАЯ ОСОБЕННОСТЬ:
Таблица содержит исторические алиасы в смешанном регистре (Kwei, Mwei, Gwei).
Так как поиск идёт по имени в нижнем регистре, по имени они недостижимы.
Алиасы остаются в экспортируемой таблице, поиск остаётся
регистронезависимым.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from kapoio_unit.core.contracts import validate_unit_map
from kapoio_unit.core.domain.errors import UnknownUnitError

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Базовая единица (множитель 1)
BASE_UNIT: Final[str] = "wei"

# Единица отображения по умолчанию (10^18)
DEFAULT_UNIT: Final[str] = "kappa"

# Минимальное число дробных знаков при форматировании
MIN_DECIMAL_DIGITS: Final[int] = 1


# =============================================================================
# ТАБЛИЦА ЕДИНИЦ
# =============================================================================

UNIT_MAP: Final[Mapping[str, str]] = MappingProxyType(
    {
        "nokappa": "0",
        "wei": "1",
        "kwei": "1000",
        "Kwei": "1000",
        "babbage": "1000",
        "femtokappa": "1000",
        "mwei": "1000000",
        "Mwei": "1000000",
        "lovelace": "1000000",
        "picokappa": "1000000",
        "gwei": "1000000000",
        "Gwei": "1000000000",
        "shannon": "1000000000",
        "nanokappa": "1000000000",
        "nano": "1000000000",
        "szabo": "1000000000000",
        "microkappa": "1000000000000",
        "micro": "1000000000000",
        "finney": "1000000000000000",
        "millikappa": "1000000000000000",
        "milli": "1000000000000000",
        "kappa": "1000000000000000000",
        "kkappa": "1000000000000000000000",
        "grand": "1000000000000000000000",
        "mkappa": "1000000000000000000000000",
        "gkappa": "1000000000000000000000000000",
        "tkappa": "1000000000000000000000000000000",
    }
)

validate_unit_map(UNIT_MAP)


# =============================================================================
# РЕЗОЛВЕР
# =============================================================================


def normalize_unit_name(unit: str | None = None) -> str:
    """
    Приведение имени единицы к ключу таблицы.

    Args:
        unit: Имя единицы (регистр не важен). None или "" → DEFAULT_UNIT

    Returns:
        Имя в нижнем регистре, присутствующее в UNIT_MAP

    Raises:
        UnknownUnitError: Если имени нет в таблице или это не строка
    """
    if not unit:
        return DEFAULT_UNIT

    if not isinstance(unit, str):
        raise UnknownUnitError(unit, UNIT_MAP)

    name = unit.lower()
    if name not in UNIT_MAP:
        logger.debug("Unknown unit requested: %r", unit)
        raise UnknownUnitError(unit, UNIT_MAP)

    return name


def get_value_of_unit(unit: str | None = None) -> int:
    """
    Множитель единицы в базовых единицах (wei).

    Args:
        unit: Имя единицы (по умолчанию kappa)

    Returns:
        Множитель как int (произвольная точность)

    Raises:
        UnknownUnitError: Если единица неизвестна

    Examples:
        >>> get_value_of_unit("gwei")
        1000000000
        >>> get_value_of_unit() == 10**18
        True
    """
    return int(UNIT_MAP[normalize_unit_name(unit)], 10)


def unit_decimal_digits(unit: str | None = None) -> int:
    """
    Число дробных знаков единицы.

    len(множитель) - 1, но не меньше MIN_DECIMAL_DIGITS: для "0" и "1"
    получается 1, хотя реальный масштаб wei — ноль знаков.

    Raises:
        UnknownUnitError: Если единица неизвестна
    """
    factor = UNIT_MAP[normalize_unit_name(unit)]
    return len(factor) - 1 or MIN_DECIMAL_DIGITS
