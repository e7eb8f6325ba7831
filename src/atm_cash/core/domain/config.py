"""
CashStoreConfig — Конфигурация кассового хранилища

Immutable Pydantic модель с параметрами, фиксируемыми при создании
банкомата: набор номиналов, минимальная сумма выдачи, лимит банкнот
одного номинала на одну операцию, порядок выдачи.
"""

from typing import Any, Tuple

from pydantic import BaseModel, Field, model_validator

from .denominations import DispenseOrder, order_denominations, validate_denomination


class CashStoreConfig(BaseModel):
    """
    Конфигурация банкомата.

    denominations после валидации упорядочены согласно dispense_order
    и не содержат дубликатов.
    """

    denominations: Tuple[int, ...] = Field(
        ..., min_length=1, description="Поддерживаемые номиналы в порядке выдачи"
    )
    min_withdrawal_amount: int = Field(
        ..., gt=0, description="Сумма выдачи должна быть кратна этому значению"
    )
    max_notes_per_denomination: int = Field(
        ..., gt=0, description="Максимум банкнот одного номинала за одну выдачу"
    )
    dispense_order: DispenseOrder = Field(
        default=DispenseOrder.DESCENDING, description="Порядок перебора номиналов"
    )

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_denominations(cls, data: Any) -> Any:
        """
        Приведение номиналов к упорядоченному кортежу.

        Принимает set/frozenset/list/tuple; номинал 0 и отрицательные
        отклоняются здесь, до деления в жадном алгоритме.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        order = DispenseOrder(data.get("dispense_order", DispenseOrder.DESCENDING))
        data["dispense_order"] = order

        raw = data.get("denominations")
        if isinstance(raw, (set, frozenset, list, tuple)):
            data["denominations"] = order_denominations(
                [validate_denomination(d) for d in raw], order
            )
        return data
