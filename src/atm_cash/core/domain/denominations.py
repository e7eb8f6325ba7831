"""
Denominations — Номиналы банкнот и порядок выдачи

Единственный допустимый способ:
- проверить номинал и количество банкнот
- упорядочить номиналы для жадной выдачи
- посчитать денежную стоимость инвентаря

Порядок выдачи фиксируется при создании хранилища и не зависит
от порядка итерации словарей.
"""

from enum import Enum
from typing import Dict, Final, Iterable, Mapping, Tuple


# =============================================================================
# CONSTANTS
# =============================================================================

# Номиналы демонстрационной сети
DEFAULT_DENOMINATIONS: Final[Tuple[int, ...]] = (1, 2, 5, 10, 20, 50, 100, 200, 500)

DEFAULT_MIN_WITHDRAWAL_AMOUNT: Final[int] = 10

DEFAULT_MAX_NOTES_PER_DENOMINATION: Final[int] = 100


# =============================================================================
# ENUMS
# =============================================================================


class DispenseOrder(str, Enum):
    """Порядок перебора номиналов при жадной выдаче"""

    DESCENDING = "descending"
    ASCENDING = "ascending"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """True для int, но не для bool (bool — подкласс int)."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_denomination(value: object) -> int:
    """
    Проверка номинала.

    Номинал 0 запрещён: он дал бы деление на ноль в жадном алгоритме.

    Args:
        value: Номинал

    Returns:
        Номинал как int

    Raises:
        ValueError: Если номинал не целый или не положительный
    """
    if not is_strict_int(value):
        raise ValueError(f"Denomination must be an integer, got {value!r}")

    if value <= 0:
        raise ValueError(f"Denomination must be positive, got {value}")

    return value


def validate_note_counts(
    counts: Mapping[int, int], supported: Iterable[int]
) -> Dict[int, int]:
    """
    Проверка пачки банкнот целиком, до любой мутации.

    Args:
        counts: номинал → количество
        supported: поддерживаемые номиналы

    Returns:
        Копия counts (dict), безопасная для применения

    Raises:
        ValueError: Неподдерживаемый номинал или отрицательное/нецелое количество
    """
    if not isinstance(counts, Mapping):
        raise ValueError(
            f"Note counts must be a mapping of denomination to count, got {type(counts).__name__}"
        )

    supported_set = frozenset(supported)
    validated: Dict[int, int] = {}

    for denomination, count in counts.items():
        if not is_strict_int(denomination) or denomination not in supported_set:
            raise ValueError(f"Unsupported denomination: {denomination!r}")
        if not is_strict_int(count):
            raise ValueError(
                f"Note count for {denomination} must be an integer, got {count!r}"
            )
        if count < 0:
            raise ValueError(f"Note count for {denomination} cannot be negative: {count}")
        validated[denomination] = count

    return validated


# =============================================================================
# ПОРЯДОК И СТОИМОСТЬ
# =============================================================================


def order_denominations(
    denominations: Iterable[int], order: DispenseOrder = DispenseOrder.DESCENDING
) -> Tuple[int, ...]:
    """
    Детерминированный порядок номиналов (дубликаты схлопываются).

    Args:
        denominations: Номиналы в произвольном порядке
        order: DESCENDING (крупные первыми) или ASCENDING

    Returns:
        Кортеж номиналов в порядке выдачи
    """
    return tuple(
        sorted(set(denominations), reverse=(order == DispenseOrder.DESCENDING))
    )


def inventory_value(notes: Mapping[int, int]) -> int:
    """
    Денежная стоимость инвентаря: Σ номинал × количество.

    Args:
        notes: номинал → количество

    Returns:
        Сумма в единицах валюты
    """
    return sum(denomination * count for denomination, count in notes.items())
