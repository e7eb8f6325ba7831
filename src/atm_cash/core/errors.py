"""
Errors — Таксономия ошибок кассового хранилища

Все ошибки ядра наследуются от CashStoreError, поэтому вызывающий код
может перехватывать их одним except и различать по типу или по code.

Виды ошибок:
- ConfigError: некорректные параметры конструирования
- InitializationError: некорректные данные для initialize
- DepositError: некорректные данные для deposit
- WithdrawalError: сумма не кратна минимуму или нет точного размена
"""

from enum import Enum
from typing import Any, Optional


# =============================================================================
# ENUMS
# =============================================================================


class WithdrawalFailure(str, Enum):
    """Причина отказа в выдаче"""

    INVALID_AMOUNT = "invalid_amount"
    NOT_MULTIPLE_OF_MINIMUM = "not_multiple_of_minimum"
    CANNOT_MAKE_EXACT_AMOUNT = "cannot_make_exact_amount"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CashStoreError(Exception):
    """
    Базовая ошибка кассового хранилища.

    Attributes:
        message: Человекочитаемое описание
        code: Машинный код вида ошибки (стабилен, используется в логах)
    """

    code: str = "cash_store_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(CashStoreError):
    """Некорректная конфигурация: пустой набор номиналов, номинал <= 0, лимиты <= 0."""

    code = "config_error"


class InitializationError(CashStoreError):
    """Неподдерживаемый номинал или отрицательное количество в initialize."""

    code = "initialization_error"


class DepositError(CashStoreError):
    """Неподдерживаемый номинал или отрицательное количество в deposit."""

    code = "deposit_error"


class WithdrawalError(CashStoreError):
    """
    Отказ в выдаче.

    Инвентарь хранилища после WithdrawalError всегда остаётся
    в состоянии до вызова withdraw.
    """

    code = "withdrawal_error"

    def __init__(
        self,
        message: str,
        failure: WithdrawalFailure,
        amount: Any = None,
    ):
        super().__init__(message)
        self.failure = failure
        self.amount = amount
