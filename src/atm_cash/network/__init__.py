"""Network — агрегация наличности по сети банкоматов."""

from .aggregator import CashNetwork

__all__ = [
    "CashNetwork",
]
