"""
CashStore — Кассовое хранилище одного банкомата

Владеет инвентарём банкнот (номинал → количество) и конфигурацией.

Гарантии:
- Ключи инвентаря совпадают с набором номиналов, значения >= 0
- initialize/deposit/withdraw атомарны: при ошибке инвентарь не меняется
- withdraw сначала строит план по копии инвентаря, затем применяет его
- Все операции чтения-записи выполняются под одним RLock
"""

import itertools
from threading import RLock
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import jsonschema
import structlog
from pydantic import ValidationError

from atm_cash.core.contracts import validate_cash_store_snapshot
from atm_cash.core.domain.config import CashStoreConfig
from atm_cash.core.domain.denominations import (
    DispenseOrder,
    inventory_value,
    validate_note_counts,
)
from atm_cash.core.domain.withdrawal import DispensePlan, WithdrawalResult
from atm_cash.core.errors import (
    ConfigError,
    DepositError,
    InitializationError,
    WithdrawalError,
)
from atm_cash.dispensing import plan_withdrawal

log = structlog.get_logger(__name__)

SNAPSHOT_SCHEMA_VERSION = "1"

_store_ids = itertools.count(1)


class CashStore:
    """
    Инвентарь банкнот одного банкомата.

    Порядок выдачи (по умолчанию от крупных номиналов к мелким) фиксируется
    при создании и доступен через denominations.
    """

    def __init__(
        self,
        denominations: Iterable[int],
        min_withdrawal_amount: int,
        max_notes_per_denomination: int,
        dispense_order: DispenseOrder = DispenseOrder.DESCENDING,
        store_id: Optional[str] = None,
    ):
        """
        Args:
            denominations: поддерживаемые номиналы (положительные целые)
            min_withdrawal_amount: сумма выдачи должна быть ему кратна
            max_notes_per_denomination: лимит банкнот одного номинала за выдачу
            dispense_order: порядок перебора номиналов
            store_id: метка банкомата для логов и снапшотов

        Raises:
            ConfigError: пустой набор номиналов, номинал <= 0, лимиты <= 0
        """
        try:
            if isinstance(denominations, (str, bytes)) or not isinstance(
                denominations, Iterable
            ):
                raise ConfigError(
                    f"Denominations must be a collection of integers, got {denominations!r}"
                )
            config = CashStoreConfig(
                denominations=tuple(denominations),
                min_withdrawal_amount=min_withdrawal_amount,
                max_notes_per_denomination=max_notes_per_denomination,
                dispense_order=dispense_order,
            )
        except (ValidationError, ValueError) as e:
            log.warning("[CashStore] Invalid configuration", error=str(e))
            raise ConfigError(f"Invalid cash store configuration: {e}") from e

        self._config = config
        self._store_id = store_id or f"atm-{next(_store_ids)}"
        self._available: Dict[int, int] = {d: 0 for d in config.denominations}
        self._lock = RLock()

    @classmethod
    def from_config(
        cls, config: CashStoreConfig, store_id: Optional[str] = None
    ) -> "CashStore":
        return cls(
            denominations=config.denominations,
            min_withdrawal_amount=config.min_withdrawal_amount,
            max_notes_per_denomination=config.max_notes_per_denomination,
            dispense_order=config.dispense_order,
            store_id=store_id,
        )

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def store_id(self) -> str:
        return self._store_id

    @property
    def config(self) -> CashStoreConfig:
        return self._config

    @property
    def denominations(self) -> Tuple[int, ...]:
        """Номиналы в порядке выдачи."""
        return self._config.denominations

    @property
    def min_withdrawal_amount(self) -> int:
        return self._config.min_withdrawal_amount

    @property
    def max_notes_per_denomination(self) -> int:
        return self._config.max_notes_per_denomination

    @property
    def dispense_order(self) -> DispenseOrder:
        return self._config.dispense_order

    # -------------------------------------------------------------------------
    # Загрузка банкнот
    # -------------------------------------------------------------------------

    def initialize(self, counts: Mapping[int, int]) -> None:
        """
        Замена количества банкнот для перечисленных номиналов.

        Неперечисленные номиналы сохраняют текущее количество.

        Raises:
            InitializationError: неподдерживаемый номинал или отрицательное количество
        """
        with self._lock:
            try:
                validated = validate_note_counts(counts, self._config.denominations)
            except ValueError as e:
                log.warning(
                    "[CashStore] Initialization rejected",
                    store_id=self._store_id,
                    error=str(e),
                )
                raise InitializationError(
                    f"Invalid denomination or count for initialize: {e}"
                ) from e

            self._available.update(validated)

            log.info(
                "[CashStore] Initialized",
                store_id=self._store_id,
                notes=validated,
                total_cash=inventory_value(self._available),
            )

    def deposit(self, counts: Mapping[int, int]) -> None:
        """
        Добавление банкнот к текущему инвентарю.

        Raises:
            DepositError: неподдерживаемый номинал или отрицательное количество
        """
        with self._lock:
            try:
                validated = validate_note_counts(counts, self._config.denominations)
            except ValueError as e:
                log.warning(
                    "[CashStore] Deposit rejected",
                    store_id=self._store_id,
                    error=str(e),
                )
                raise DepositError(f"Invalid denomination or count for deposit: {e}") from e

            for denomination, count in validated.items():
                self._available[denomination] += count

            log.info(
                "[CashStore] Deposit applied",
                store_id=self._store_id,
                deposited=inventory_value(validated),
                total_cash=inventory_value(self._available),
            )

    # -------------------------------------------------------------------------
    # Выдача
    # -------------------------------------------------------------------------

    def plan_withdrawal(self, amount: int) -> DispensePlan:
        """
        План выдачи по текущему инвентарю без мутаций и без исключений.

        Returns:
            DispensePlan (feasible=False с причиной при отказе)
        """
        with self._lock:
            return plan_withdrawal(amount, dict(self._available), self._config)

    def can_withdraw(self, amount: int) -> bool:
        return self.plan_withdrawal(amount).feasible

    def withdraw(self, amount: int) -> WithdrawalResult:
        """
        Выдача суммы жадным подбором банкнот.

        План строится по копии инвентаря; инвентарь меняется одним шагом
        только для выполнимого плана. amount == 0 даёт пустой результат.

        Args:
            amount: запрошенная сумма

        Returns:
            WithdrawalResult с выданными банкнотами

        Raises:
            WithdrawalError: сумма некорректна, не кратна минимуму
                или не может быть выдана точно
        """
        with self._lock:
            plan = plan_withdrawal(amount, dict(self._available), self._config)

            if not plan.feasible:
                log.warning(
                    "[CashStore] Withdrawal rejected",
                    store_id=self._store_id,
                    amount=amount,
                    failure=plan.failure.value,
                    details=plan.details,
                )
                raise WithdrawalError(plan.details, failure=plan.failure, amount=amount)

            for denomination, count in plan.notes.items():
                self._available[denomination] -= count

            log.info(
                "[CashStore] Withdrawal dispensed",
                store_id=self._store_id,
                amount=amount,
                notes=plan.notes,
                total_cash=inventory_value(self._available),
            )
            return WithdrawalResult.from_plan(plan)

    # -------------------------------------------------------------------------
    # Наблюдение
    # -------------------------------------------------------------------------

    def available_notes(self) -> Mapping[int, int]:
        """
        Read-only копия инвентаря в порядке выдачи.

        Изменения хранилища после вызова в копии не отражаются.
        """
        with self._lock:
            return MappingProxyType(
                {d: self._available[d] for d in self._config.denominations}
            )

    def total_cash(self) -> int:
        """Σ номинал × количество по текущему инвентарю."""
        with self._lock:
            return inventory_value(self._available)

    # -------------------------------------------------------------------------
    # Снапшоты
    # -------------------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        """JSON-совместимый снапшот (контракт cash_store_snapshot)."""
        with self._lock:
            return {
                "schema_version": SNAPSHOT_SCHEMA_VERSION,
                "store_id": self._store_id,
                "denominations": list(self._config.denominations),
                "dispense_order": self._config.dispense_order.value,
                "min_withdrawal_amount": self._config.min_withdrawal_amount,
                "max_notes_per_denomination": self._config.max_notes_per_denomination,
                "available_notes": {
                    str(d): self._available[d] for d in self._config.denominations
                },
                "total_cash": inventory_value(self._available),
            }

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any]) -> "CashStore":
        """
        Восстановление хранилища из снапшота.

        Raises:
            ConfigError: снапшот не соответствует контракту cash_store_snapshot
        """
        try:
            validate_cash_store_snapshot(data)
        except jsonschema.ValidationError as e:
            raise ConfigError(f"Invalid cash store snapshot: {e.message}") from e

        store = cls(
            denominations=data["denominations"],
            min_withdrawal_amount=data["min_withdrawal_amount"],
            max_notes_per_denomination=data["max_notes_per_denomination"],
            dispense_order=DispenseOrder(data["dispense_order"]),
            store_id=data["store_id"],
        )
        store.initialize({int(d): count for d, count in data["available_notes"].items()})
        return store

    def __repr__(self) -> str:
        return (
            f"CashStore({self._store_id}, denominations={list(self._config.denominations)}, "
            f"total_cash={self.total_cash()})"
        )
