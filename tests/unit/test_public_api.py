"""
Тесты публичного API пакета kapoio_unit

Проверяет экспортируемые имена и сценарии из документации пакета.
"""

import pytest

import kapoio_unit
from kapoio_unit import (
    InvalidAmountError,
    TooManyDecimalPlacesError,
    TooManyDecimalPointsError,
    UnitConversionError,
    UnknownUnitError,
    from_wei,
    get_value_of_unit,
    number_to_string,
    to_wei,
    unit_map,
)


class TestExports:
    """Экспортируемые имена"""

    def test_all_names_resolve(self) -> None:
        """Каждое имя из __all__ доступно"""
        for name in kapoio_unit.__all__:
            assert hasattr(kapoio_unit, name), name

    def test_unit_map_alias(self) -> None:
        """unit_map и UNIT_MAP — одна таблица, с алиасами"""
        assert unit_map is kapoio_unit.UNIT_MAP
        assert "Gwei" in unit_map
        assert "nokappa" in unit_map


class TestDocumentedScenarios:
    """Сценарии использования"""

    def test_default_unit(self) -> None:
        """get_value_of_unit() == get_value_of_unit("kappa") == 10^18"""
        assert get_value_of_unit() == get_value_of_unit("kappa") == 10**18

    def test_table_values(self) -> None:
        """wei == 1, gwei == 10^9"""
        assert get_value_of_unit("wei") == 1
        assert get_value_of_unit("gwei") == 10**9

    def test_padding(self) -> None:
        """pad / без pad"""
        assert from_wei(10**18, "kappa", {"pad": True}) == "1.000000000000000000"
        assert from_wei(10**18, "kappa") == "1"

    def test_commify(self) -> None:
        """Группировка разрядов"""
        assert from_wei(1234500000000000000000, "kappa", {"commify": True}) == "1,234.5"

    def test_zero(self) -> None:
        """Ноль"""
        assert from_wei(0, "kappa") == "0"

    def test_number_to_string(self) -> None:
        """Нормализатор доступен из пакета"""
        assert number_to_string(5) == "5"

    def test_errors(self) -> None:
        """Ошибки конверсии"""
        with pytest.raises(TooManyDecimalPlacesError):
            to_wei("1.1234567890123456789", "kappa")
        with pytest.raises(TooManyDecimalPointsError):
            to_wei("1.2.3", "kappa")
        with pytest.raises(InvalidAmountError):
            to_wei(".", "kappa")
        with pytest.raises(UnknownUnitError):
            to_wei("1", "bogus")

    def test_single_base_error_class(self) -> None:
        """Все ошибки ловятся через UnitConversionError"""
        for amount, unit in [("1.2.3", "kappa"), (".", "kappa"), ("1", "bogus"), ("x", "kappa")]:
            with pytest.raises(UnitConversionError):
                to_wei(amount, unit)
