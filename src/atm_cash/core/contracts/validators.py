"""
JSON Schema Contract Validators

Модуль для валидации JSON снапшотов кассовой сети согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (atm_cash/core/contracts/schema/):
- cash_store_snapshot.json
- network_snapshot.json
- withdrawal_result.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'cash_store_snapshot')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class CashStoreSnapshotValidator(ContractValidator):
    """Валидатор для cash_store_snapshot контракта."""

    def __init__(self):
        super().__init__("cash_store_snapshot")

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Схема + перекрёстные проверки, которые JSON Schema не выражает:
        ключи available_notes входят в denominations, total_cash согласован.

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        super().validate(data)

        denominations = set(data["denominations"])
        total = 0
        for key, count in data["available_notes"].items():
            denomination = int(key)
            if denomination not in denominations:
                raise jsonschema.ValidationError(
                    f"available_notes key {key!r} is not a supported denomination"
                )
            total += denomination * count

        if total != data["total_cash"]:
            raise jsonschema.ValidationError(
                f"total_cash {data['total_cash']} does not match available_notes sum {total}"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except jsonschema.ValidationError:
            return False
        return True


class NetworkSnapshotValidator(ContractValidator):
    """Валидатор для network_snapshot контракта (включая вложенные снапшоты)."""

    def __init__(self):
        super().__init__("network_snapshot")
        self._store_validator = CashStoreSnapshotValidator()

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)

        if data["store_count"] != len(data["stores"]):
            raise jsonschema.ValidationError(
                f"store_count {data['store_count']} != len(stores) {len(data['stores'])}"
            )

        for store in data["stores"]:
            self._store_validator.validate(store)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except jsonschema.ValidationError:
            return False
        return True


class WithdrawalResultValidator(ContractValidator):
    """Валидатор для withdrawal_result контракта."""

    def __init__(self):
        super().__init__("withdrawal_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_cash_store_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация cash_store_snapshot данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CashStoreSnapshotValidator().validate(data)


def validate_network_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация network_snapshot данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NetworkSnapshotValidator().validate(data)


def validate_withdrawal_result(data: Dict[str, Any]) -> None:
    """
    Валидация withdrawal_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    WithdrawalResultValidator().validate(data)
