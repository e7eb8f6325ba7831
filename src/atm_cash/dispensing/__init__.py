"""Dispensing — подбор банкнот для выдачи.

- Жадный перебор номиналов в фиксированном порядке
- Лимит банкнот на номинал за операцию
- Чистая функция: план строится по снапшоту инвентаря
"""

from .greedy import plan_withdrawal

__all__ = [
    "plan_withdrawal",
]
