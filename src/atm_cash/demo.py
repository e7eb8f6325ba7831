"""
Demo — демонстрационный сценарий сети из двух банкоматов

Запуск: python -m atm_cash
"""

import structlog

from atm_cash.core.domain.denominations import (
    DEFAULT_DENOMINATIONS,
    DEFAULT_MAX_NOTES_PER_DENOMINATION,
    DEFAULT_MIN_WITHDRAWAL_AMOUNT,
)
from atm_cash.core.errors import CashStoreError
from atm_cash.network import CashNetwork
from atm_cash.store import CashStore

log = structlog.get_logger(__name__)

# Начальная загрузка банкоматов
SAMPLE_NOTES_ATM_1 = {1: 100, 10: 50, 100: 20}
SAMPLE_NOTES_ATM_2 = {1: 200, 20: 30, 100: 10}

SAMPLE_WITHDRAWAL_AMOUNT = 230


def configure_logging() -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ]
    )


def build_sample_network() -> tuple[CashNetwork, CashStore, CashStore]:
    """Два банкомата с демонстрационной загрузкой, зарегистрированные в сети."""
    atm1 = CashStore(
        DEFAULT_DENOMINATIONS,
        DEFAULT_MIN_WITHDRAWAL_AMOUNT,
        DEFAULT_MAX_NOTES_PER_DENOMINATION,
        store_id="atm-1",
    )
    atm1.initialize(SAMPLE_NOTES_ATM_1)

    atm2 = CashStore(
        DEFAULT_DENOMINATIONS,
        DEFAULT_MIN_WITHDRAWAL_AMOUNT,
        DEFAULT_MAX_NOTES_PER_DENOMINATION,
        store_id="atm-2",
    )
    atm2.initialize(SAMPLE_NOTES_ATM_2)

    network = CashNetwork()
    network.register(atm1)
    network.register(atm2)
    return network, atm1, atm2


def main() -> int:
    configure_logging()

    try:
        network, atm1, _ = build_sample_network()
        print(f"Total money in the bank network: {network.total_cash()}")

        result = atm1.withdraw(SAMPLE_WITHDRAWAL_AMOUNT)
        print(f"Withdrawal from ATM 1: {result.as_dict()}")

        print(f"Total money in the bank network after withdrawal: {network.total_cash()}")
        print(f"Recomputed total money in the bank network: {network.recompute_total()}")
    except CashStoreError as e:
        log.error("[Demo] Scenario failed", error_code=e.code, error=e.message)
        print(f"Exception: {e.message}")
        return 1

    return 0
