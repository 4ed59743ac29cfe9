"""
Regression tests — marked with @pytest.mark.regression.
These must never break.
"""
import pytest
from datetime import datetime, timezone
from decimal import Decimal
from app.engine.analytics import AnalyticsEngine
from app.engine.errors import InvalidMonth
from app.models.transaction import Transaction
from app.repository.store import InMemoryStore


pytestmark = pytest.mark.regression


def _engine(*txns: Transaction) -> AnalyticsEngine:
    store = InMemoryStore()
    store.load(txns)
    return AnalyticsEngine(store)


def _txn(price, month, sold=None, category=None, year=2021, **kwargs) -> Transaction:
    return Transaction(
        price=Decimal(str(price)) if price is not None else None,
        sold=sold,
        category=category,
        date_of_sale=datetime(year, month, 15, tzinfo=timezone.utc),
        **kwargs,
    )


def test_documented_two_transaction_example():
    engine = _engine(
        _txn(50, 1, sold=True, category="A"),
        _txn(150, 1, sold=False, category="B"),
    )
    summary = engine.summary(1)
    assert summary.total_sale_amount == Decimal("200")
    assert (summary.total_sold_items, summary.total_not_sold_items) == (1, 1)

    counts = {r.price_range: r.number_of_items for r in engine.histogram(1)}
    assert counts["1-100"] == 1
    assert counts["101-200"] == 1
    assert sum(counts.values()) == 2

    assert sorted((c.category, c.number_of_items) for c in engine.by_category(1)) == [("A", 1), ("B", 1)]


def test_every_month_has_invariant_shapes(engine, store):
    for month in range(1, 13):
        matched = store.list_by_month(month)

        histogram = engine.histogram(month)
        assert len(histogram) == 10
        assert sum(r.number_of_items for r in histogram) == len(
            [t for t in matched if t.price is not None and t.price >= 1]
        )

        summary = engine.summary(month)
        assert summary.total_sold_items + summary.total_not_sold_items <= len(matched)

        counts = [c.number_of_items for c in engine.by_category(month)]
        assert counts == sorted(counts, reverse=True)

        assert engine.search(month) == matched
        assert engine.search(month, "no-product-is-called-this") == engine.search(month)


def test_price_below_one_is_never_bucketed():
    engine = _engine(_txn(0.99, 2), _txn(0, 2), _txn(1, 2))
    histogram = engine.histogram(2)
    assert histogram[0].number_of_items == 1
    assert sum(r.number_of_items for r in histogram) == 1
    # still part of revenue
    assert engine.summary(2).total_sale_amount == Decimal("1.99")


def test_month_filter_ignores_year():
    engine = _engine(_txn(10, 6, year=2019), _txn(20, 6, year=2024), _txn(40, 7, year=2024))
    assert engine.summary(6).total_sale_amount == Decimal("30.00")


@pytest.mark.parametrize("month", [0, 13, "abc", None])
def test_invalid_months_never_compute(month):
    engine = _engine(_txn(10, 1))
    for operation in (engine.summary, engine.histogram, engine.by_category, engine.search, engine.combined):
        with pytest.raises(InvalidMonth):
            operation(month)
