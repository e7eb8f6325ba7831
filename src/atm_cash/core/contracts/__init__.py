"""
Contract Validation Module

Модуль для валидации JSON контрактов кассовой сети.
"""

from .validators import (
    CashStoreSnapshotValidator,
    ContractValidator,
    NetworkSnapshotValidator,
    SchemaLoader,
    WithdrawalResultValidator,
    validate_cash_store_snapshot,
    validate_network_snapshot,
    validate_withdrawal_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CashStoreSnapshotValidator",
    "NetworkSnapshotValidator",
    "WithdrawalResultValidator",
    # Functions
    "validate_cash_store_snapshot",
    "validate_network_snapshot",
    "validate_withdrawal_result",
]
