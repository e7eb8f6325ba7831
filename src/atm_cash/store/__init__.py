"""Store — кассовое хранилище банкомата."""

from .cash_store import CashStore

__all__ = [
    "CashStore",
]
