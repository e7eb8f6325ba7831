"""Greedy Dispensing — жадный подбор банкнот для выдачи.

Алгоритм:
1. amount должен быть неотрицательным целым
2. amount кратен min_withdrawal_amount
3. Перебор номиналов в порядке config.denominations:
   take = min(remaining // d, available[d], max_notes_per_denomination)
4. Остаток != 0 → выдача невозможна

Планировщик работает только с копией инвентаря и никогда не мутирует
переданный mapping. Применение плана — ответственность хранилища.
"""

from typing import Dict, Mapping

import structlog

from atm_cash.core.domain.config import CashStoreConfig
from atm_cash.core.domain.denominations import is_strict_int
from atm_cash.core.domain.withdrawal import DispensePlan
from atm_cash.core.errors import WithdrawalFailure

log = structlog.get_logger(__name__)


def plan_withdrawal(
    amount: int,
    available: Mapping[int, int],
    config: CashStoreConfig,
) -> DispensePlan:
    """Построение плана выдачи без мутации инвентаря.

    Args:
        amount: запрошенная сумма
        available: текущий инвентарь (номинал → количество)
        config: конфигурация хранилища (номиналы, лимиты, порядок)

    Returns:
        DispensePlan; feasible=False с причиной, если выдать нельзя
    """
    if not is_strict_int(amount) or amount < 0:
        return DispensePlan(
            amount=amount if is_strict_int(amount) else None,
            feasible=False,
            failure=WithdrawalFailure.INVALID_AMOUNT,
            remaining=amount if is_strict_int(amount) else 0,
            details=f"Amount must be a non-negative integer, got {amount!r}",
        )

    if amount % config.min_withdrawal_amount != 0:
        return DispensePlan(
            amount=amount,
            feasible=False,
            failure=WithdrawalFailure.NOT_MULTIPLE_OF_MINIMUM,
            remaining=amount,
            details=(
                f"Amount {amount} is not a multiple of minimum "
                f"{config.min_withdrawal_amount}"
            ),
        )

    remaining = amount
    notes: Dict[int, int] = {}

    for denomination in config.denominations:
        if remaining == 0:
            break

        take = min(
            remaining // denomination,
            available.get(denomination, 0),
            config.max_notes_per_denomination,
        )
        if take > 0:
            notes[denomination] = take
            remaining -= denomination * take

    if remaining != 0:
        log.debug(
            "[GreedyDispensing] Plan infeasible",
            amount=amount,
            remaining=remaining,
            partial_notes=notes,
        )
        return DispensePlan(
            amount=amount,
            feasible=False,
            failure=WithdrawalFailure.CANNOT_MAKE_EXACT_AMOUNT,
            notes=notes,
            remaining=remaining,
            details=f"cannot make exact amount {amount}: {remaining} left uncovered",
        )

    log.debug("[GreedyDispensing] Plan built", amount=amount, notes=notes)
    return DispensePlan(
        amount=amount,
        feasible=True,
        failure=None,
        notes=notes,
        remaining=0,
        details=f"Dispense {amount} with {sum(notes.values())} notes",
    )
