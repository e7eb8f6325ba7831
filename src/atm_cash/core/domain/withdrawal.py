"""
Withdrawal — Модели результата выдачи

DispensePlan — результат планировщика (без мутаций, без исключений).
WithdrawalResult — банкноты, выданные одной успешной операцией.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from pydantic import BaseModel, Field

from atm_cash.core.errors import WithdrawalFailure

from .denominations import inventory_value


# =============================================================================
# PLAN
# =============================================================================


@dataclass(frozen=True)
class DispensePlan:
    """Результат жадного планирования выдачи."""

    # None, если запрошенная сумма не целое число
    amount: Optional[int]
    feasible: bool
    failure: Optional[WithdrawalFailure]

    # номинал → количество, в порядке перебора
    notes: Dict[int, int] = field(default_factory=dict)

    # Остаток, который не удалось покрыть (0 при feasible)
    remaining: int = 0

    # Диагностика
    details: str = ""

    def dispensed_total(self) -> int:
        """Сумма, покрытая планом."""
        return inventory_value(self.notes)


# =============================================================================
# RESULT
# =============================================================================


class WithdrawalResult(BaseModel):
    """
    Банкноты, выданные одной успешной операцией.

    Ведёт себя как read-only mapping номинал → количество.
    Хранилище не сохраняет ссылку на результат.
    """

    amount: int = Field(..., ge=0, description="Запрошенная сумма")
    notes: Dict[int, int] = Field(
        default_factory=dict, description="Выданные банкноты: номинал → количество"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_plan(cls, plan: DispensePlan) -> "WithdrawalResult":
        return cls(amount=plan.amount, notes=dict(plan.notes))

    def __getitem__(self, denomination: int) -> int:
        return self.notes[denomination]

    def __contains__(self, denomination: object) -> bool:
        return denomination in self.notes

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.notes)

    def __bool__(self) -> bool:
        # успешная выдача истинна и при amount == 0
        return True

    def keys(self):
        return self.notes.keys()

    def values(self):
        return self.notes.values()

    def items(self):
        return self.notes.items()

    def get(self, denomination: int, default: int = 0) -> int:
        return self.notes.get(denomination, default)

    def as_dict(self) -> Dict[int, int]:
        """Копия банкнот (изменение копии не влияет на результат)."""
        return dict(self.notes)

    def to_contract(self) -> Dict[str, object]:
        """JSON-совместимое представление (контракт withdrawal_result)."""
        return {
            "amount": self.amount,
            "notes": {str(d): count for d, count in self.notes.items()},
        }

    def total(self) -> int:
        """Σ номинал × количество (равно amount для успешной выдачи)."""
        return inventory_value(self.notes)

    def note_count(self) -> int:
        """Общее число выданных банкнот."""
        return sum(self.notes.values())
