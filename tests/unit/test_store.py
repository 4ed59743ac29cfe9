"""Unit tests for app/repository/store.py."""
import threading
import pytest
from datetime import datetime, timezone
from app.engine.errors import StoreUnavailable
from app.engine.month_filter import filter_by_month
from app.models.transaction import Transaction
from app.repository.store import InMemoryStore, StoreAlreadySeeded


def _txns():
    return [
        Transaction(id=1, date_of_sale=datetime(2021, 4, 1, tzinfo=timezone.utc)),
        Transaction(id=2, date_of_sale=datetime(2022, 5, 1, tzinfo=timezone.utc)),
        Transaction(id=2, date_of_sale=datetime(2020, 4, 30, tzinfo=timezone.utc)),
    ]


def test_reads_before_seeding_are_unavailable():
    store = InMemoryStore()
    assert store.is_seeded is False
    with pytest.raises(StoreUnavailable):
        store.list_all()
    with pytest.raises(StoreUnavailable):
        store.list_by_month(4)


def test_load_keeps_duplicates_and_order():
    store = InMemoryStore()
    assert store.load(_txns()) == 3
    assert [t.id for t in store.list_all()] == [1, 2, 2]
    assert store.count() == 3


def test_list_by_month_equals_filtered_list_all():
    store = InMemoryStore()
    store.load(_txns())
    for month in range(1, 13):
        assert store.list_by_month(month) == filter_by_month(store.list_all(), month)
    assert [t.id for t in store.list_by_month(4)] == [1, 2]


def test_seeding_twice_is_rejected():
    store = InMemoryStore()
    store.load(_txns())
    with pytest.raises(StoreAlreadySeeded):
        store.load([])
    assert store.count() == 3


def test_list_all_returns_a_copy():
    store = InMemoryStore()
    store.load(_txns())
    listed = store.list_all()
    listed.clear()
    assert store.count() == 3


def test_closed_store_is_unavailable_and_stays_closed():
    store = InMemoryStore()
    store.load(_txns())
    store.close()
    store.close()
    assert store.is_closed is True
    with pytest.raises(StoreUnavailable):
        store.list_all()
    with pytest.raises(StoreUnavailable):
        store.load(_txns())


def test_concurrent_reads_see_the_same_snapshot():
    store = InMemoryStore()
    store.load(_txns() * 100)
    results = []

    def read():
        results.append(len(store.list_by_month(4)))

    threads = [threading.Thread(target=read) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [200] * 10
