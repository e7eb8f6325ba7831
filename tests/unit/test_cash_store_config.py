"""
Tests for CashStoreConfig

Покрывает:
- Создание и валидация конфигурации
- Нормализация набора номиналов (порядок, дубликаты)
- Отклонение некорректных лимитов
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from atm_cash.core.domain import CashStoreConfig, DispenseOrder


@pytest.fixture
def valid_config_data():
    """Валидная конфигурация демонстрационного банкомата."""
    return {
        "denominations": {1, 2, 5, 10, 20, 50, 100, 200, 500},
        "min_withdrawal_amount": 10,
        "max_notes_per_denomination": 100,
    }


class TestCashStoreConfigCreation:
    """Тесты создания конфигурации"""

    def test_valid_config(self, valid_config_data):
        config = CashStoreConfig(**valid_config_data)

        assert config.denominations == (500, 200, 100, 50, 20, 10, 5, 2, 1)
        assert config.min_withdrawal_amount == 10
        assert config.max_notes_per_denomination == 100
        assert config.dispense_order == DispenseOrder.DESCENDING

    def test_ascending_order(self, valid_config_data):
        config = CashStoreConfig(**valid_config_data, dispense_order=DispenseOrder.ASCENDING)
        assert config.denominations == (1, 2, 5, 10, 20, 50, 100, 200, 500)

    def test_order_from_string(self, valid_config_data):
        """dispense_order принимает строковое значение enum"""
        config = CashStoreConfig(**valid_config_data, dispense_order="ascending")
        assert config.dispense_order == DispenseOrder.ASCENDING
        assert config.denominations[0] == 1

    def test_list_input_deduplicated(self):
        config = CashStoreConfig(
            denominations=[10, 50, 10],
            min_withdrawal_amount=10,
            max_notes_per_denomination=5,
        )
        assert config.denominations == (50, 10)


class TestCashStoreConfigValidation:
    """Тесты отклонения некорректной конфигурации"""

    def test_empty_denominations_rejected(self, valid_config_data):
        valid_config_data["denominations"] = set()
        with pytest.raises(ValidationError):
            CashStoreConfig(**valid_config_data)

    def test_zero_denomination_rejected(self, valid_config_data):
        valid_config_data["denominations"] = {0, 10}
        with pytest.raises(ValidationError):
            CashStoreConfig(**valid_config_data)

    def test_negative_denomination_rejected(self, valid_config_data):
        valid_config_data["denominations"] = {-5, 10}
        with pytest.raises(ValidationError):
            CashStoreConfig(**valid_config_data)

    @pytest.mark.parametrize("field", ["min_withdrawal_amount", "max_notes_per_denomination"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_limits_rejected(self, valid_config_data, field, value):
        valid_config_data[field] = value
        with pytest.raises(ValidationError):
            CashStoreConfig(**valid_config_data)

    def test_string_limit_rejected(self, valid_config_data):
        """strict: строка "10" не приводится к int"""
        valid_config_data["min_withdrawal_amount"] = "10"
        with pytest.raises(ValidationError):
            CashStoreConfig(**valid_config_data)

    def test_unknown_order_rejected(self, valid_config_data):
        with pytest.raises(ValidationError):
            CashStoreConfig(**valid_config_data, dispense_order="random")


class TestCashStoreConfigImmutability:
    """Тесты frozen модели"""

    def test_config_is_frozen(self, valid_config_data):
        config = CashStoreConfig(**valid_config_data)
        with pytest.raises(ValidationError):
            config.min_withdrawal_amount = 20
