"""
Domain models and value objects.

Contains denominations, store configuration and withdrawal results.
"""

from atm_cash.core.domain.config import CashStoreConfig
from atm_cash.core.domain.denominations import (
    DEFAULT_DENOMINATIONS,
    DEFAULT_MAX_NOTES_PER_DENOMINATION,
    DEFAULT_MIN_WITHDRAWAL_AMOUNT,
    DispenseOrder,
    inventory_value,
    is_strict_int,
    order_denominations,
    validate_denomination,
    validate_note_counts,
)
from atm_cash.core.domain.withdrawal import DispensePlan, WithdrawalResult

__all__ = [
    # Denominations module
    "DEFAULT_DENOMINATIONS",
    "DEFAULT_MIN_WITHDRAWAL_AMOUNT",
    "DEFAULT_MAX_NOTES_PER_DENOMINATION",
    "DispenseOrder",
    "inventory_value",
    "is_strict_int",
    "order_denominations",
    "validate_denomination",
    "validate_note_counts",
    # Config model
    "CashStoreConfig",
    # Withdrawal models
    "DispensePlan",
    "WithdrawalResult",
]
