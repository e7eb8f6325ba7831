"""Тесты для CashNetwork.

Coverage:
- Кэшированная сумма при register/unregister
- Вычитание суммы на момент unregister
- Устаревание кэша после операций с хранилищем и recompute_total
- Дубликаты по identity
- Снапшот сети по контракту network_snapshot
"""

import threading

import pytest

from atm_cash import CashNetwork, CashStore
from atm_cash.core.contracts import validate_network_snapshot


DENOMINATIONS = {1, 2, 5, 10, 20, 50, 100, 200, 500}


@pytest.fixture
def store_a():
    """Банкомат с суммой 3620."""
    store = CashStore(DENOMINATIONS, 10, 100, store_id="atm-a")
    store.initialize({500: 6, 100: 5, 20: 5, 10: 2})
    return store


@pytest.fixture
def store_b():
    """Банкомат с суммой 3920."""
    store = CashStore(DENOMINATIONS, 10, 100, store_id="atm-b")
    store.initialize({500: 7, 200: 2, 20: 1})
    return store


@pytest.fixture
def network(store_a, store_b):
    network = CashNetwork()
    network.register(store_a)
    network.register(store_b)
    return network


class TestRegistration:
    """Тесты register/unregister."""

    def test_empty_network(self):
        network = CashNetwork()
        assert network.total_cash() == 0
        assert len(network) == 0

    def test_total_is_sum_of_registered(self, network, store_a, store_b):
        assert store_a.total_cash() == 3620
        assert store_b.total_cash() == 3920
        assert network.total_cash() == 7540
        assert network.stores == (store_a, store_b)
        assert store_a in network

    def test_unregister_subtracts_current_total(self, network, store_a, store_b):
        assert network.unregister(store_a) is True

        assert network.total_cash() == 3920
        assert network.stores == (store_b,)
        assert store_a not in network

    def test_unregister_uses_total_at_removal_time(self, network, store_a):
        """Вычитается сумма на момент удаления, а не на момент регистрации."""
        store_a.deposit({500: 1})

        network.unregister(store_a)

        assert network.total_cash() == 7540 - 4120

    def test_unregister_unknown_store(self, network):
        stranger = CashStore({10}, 10, 1)
        stranger.initialize({10: 5})

        assert network.unregister(stranger) is False
        assert network.total_cash() == 7540
        assert len(network) == 2

    def test_duplicate_registration(self, store_a):
        network = CashNetwork()
        network.register(store_a)
        network.register(store_a)

        assert len(network) == 2
        assert network.total_cash() == 7240

        network.unregister(store_a)

        assert len(network) == 1
        assert network.total_cash() == 3620

    def test_identity_not_equality(self, store_a):
        """Хранилище с той же загрузкой — другой объект."""
        twin = CashStore.from_snapshot(store_a.snapshot())
        network = CashNetwork()
        network.register(store_a)

        assert twin not in network
        assert network.unregister(twin) is False


class TestStaleness:
    """Кэш не отслеживает операции после регистрации."""

    def test_withdrawal_does_not_change_cached_total(self, network, store_a):
        result = store_a.withdraw(230)

        assert result.as_dict() == {100: 2, 20: 1, 10: 1}
        assert network.total_cash() == 7540

    def test_recompute_total(self, network, store_a, store_b):
        store_a.withdraw(230)
        store_b.deposit({100: 1})

        assert network.recompute_total() == 7310 + 100
        assert network.total_cash() == 7410

    def test_recompute_without_changes(self, network):
        assert network.recompute_total() == 7540

    def test_unregister_after_drift(self, network, store_a):
        """После drift и unregister recompute даёт сумму оставшихся."""
        store_a.withdraw(230)
        network.unregister(store_a)

        assert network.total_cash() == 7540 - 3390
        assert network.recompute_total() == 3920


class TestNetworkSnapshot:
    """Снапшот сети по контракту network_snapshot."""

    def test_snapshot_matches_contract(self, network, store_a):
        store_a.withdraw(230)

        data = network.snapshot()

        validate_network_snapshot(data)
        assert data["cached_total_cash"] == 7540
        assert data["live_total_cash"] == 7310
        assert data["store_count"] == 2
        assert [s["store_id"] for s in data["stores"]] == ["atm-a", "atm-b"]

    def test_snapshot_does_not_recompute(self, network, store_a):
        store_a.withdraw(230)
        network.snapshot()
        assert network.total_cash() == 7540


class TestNetworkConcurrency:
    """Регистрация из нескольких потоков согласована с чтением суммы."""

    def test_parallel_register_and_read(self):
        network = CashNetwork()
        stores = []
        for index in range(40):
            store = CashStore({10}, 10, 100, store_id=f"atm-par-{index}")
            store.initialize({10: 10})
            stores.append(store)

        observed = []

        def register_all(chunk):
            for store in chunk:
                network.register(store)
                observed.append((len(network), network.total_cash()))

        threads = [
            threading.Thread(target=register_all, args=(stores[i::4],)) for i in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(network) == 40
        assert network.total_cash() == 40 * 100
        assert all(store in network for store in stores)
        assert all(total % 100 == 0 and total <= 4000 for _, total in observed)
