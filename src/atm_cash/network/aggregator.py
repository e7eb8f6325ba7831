"""CashNetwork — агрегатор наличности по сети банкоматов.

Семантика total_cash:
- Кэшированная сумма снапшотов: вклад хранилища фиксируется в момент
  register (прибавляется) и unregister (вычитается текущее значение)
- Операции с хранилищем после регистрации в кэш не попадают
- recompute_total() пересчитывает сумму по всем хранилищам явно

Хранилища держатся в порядке регистрации; одно и то же хранилище
может быть зарегистрировано несколько раз (сравнение по identity).
"""

from threading import RLock
from typing import Any, Dict, List, Tuple

import structlog

from atm_cash.store import CashStore

log = structlog.get_logger(__name__)

SNAPSHOT_SCHEMA_VERSION = "1"


class CashNetwork:
    """Сеть банкоматов с кэшированной суммой наличности."""

    def __init__(self):
        self._stores: List[CashStore] = []
        self._total_cash: int = 0
        self._lock = RLock()

    def register(self, store: CashStore) -> None:
        """Добавление хранилища; его текущая сумма прибавляется к кэшу."""
        with self._lock:
            store_total = store.total_cash()
            self._stores.append(store)
            self._total_cash += store_total

            log.info(
                "[CashNetwork] Store registered",
                store_id=store.store_id,
                store_total=store_total,
                total_cash=self._total_cash,
                store_count=len(self._stores),
            )

    def unregister(self, store: CashStore) -> bool:
        """Удаление первого вхождения хранилища (по identity).

        Из кэша вычитается сумма хранилища на момент удаления.

        Returns:
            True если хранилище было найдено и удалено
        """
        with self._lock:
            for index, registered in enumerate(self._stores):
                if registered is store:
                    break
            else:
                log.warning(
                    "[CashNetwork] Unregister of unknown store ignored",
                    store_id=store.store_id,
                )
                return False

            store_total = store.total_cash()
            del self._stores[index]
            self._total_cash -= store_total

            log.info(
                "[CashNetwork] Store unregistered",
                store_id=store.store_id,
                store_total=store_total,
                total_cash=self._total_cash,
                store_count=len(self._stores),
            )
            return True

    def total_cash(self) -> int:
        """Кэшированная сумма наличности, O(1)."""
        with self._lock:
            return self._total_cash

    def recompute_total(self) -> int:
        """Пересчёт суммы по текущему инвентарю всех хранилищ.

        Returns:
            Новое значение total_cash
        """
        with self._lock:
            previous = self._total_cash
            self._total_cash = sum(store.total_cash() for store in self._stores)

            if previous != self._total_cash:
                log.info(
                    "[CashNetwork] Total recomputed",
                    previous_total=previous,
                    total_cash=self._total_cash,
                    drift=self._total_cash - previous,
                )
            return self._total_cash

    @property
    def stores(self) -> Tuple[CashStore, ...]:
        with self._lock:
            return tuple(self._stores)

    def snapshot(self) -> Dict[str, Any]:
        """JSON-совместимый снапшот (контракт network_snapshot)."""
        with self._lock:
            store_snapshots = [store.snapshot() for store in self._stores]
            return {
                "schema_version": SNAPSHOT_SCHEMA_VERSION,
                "cached_total_cash": self._total_cash,
                "live_total_cash": sum(s["total_cash"] for s in store_snapshots),
                "store_count": len(store_snapshots),
                "stores": store_snapshots,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)

    def __contains__(self, store: object) -> bool:
        with self._lock:
            return any(registered is store for registered in self._stores)
