"""
ATM cash network.

Управление наличностью в сети банкоматов: инвентарь банкнот
по номиналам, жадная атомарная выдача, агрегация суммы по сети.
"""

from atm_cash.core.domain import (
    CashStoreConfig,
    DispenseOrder,
    DispensePlan,
    WithdrawalResult,
)
from atm_cash.core.errors import (
    CashStoreError,
    ConfigError,
    DepositError,
    InitializationError,
    WithdrawalError,
    WithdrawalFailure,
)
from atm_cash.network import CashNetwork
from atm_cash.store import CashStore

__version__ = "0.1.0"

__all__ = [
    "CashStore",
    "CashNetwork",
    "CashStoreConfig",
    "DispenseOrder",
    "DispensePlan",
    "WithdrawalResult",
    # Errors
    "CashStoreError",
    "ConfigError",
    "InitializationError",
    "DepositError",
    "WithdrawalError",
    "WithdrawalFailure",
]
