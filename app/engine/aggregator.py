"""
Aggregation passes over a month-filtered transaction set.

Pure functions with no side effects or I/O. Revenue math uses Decimal and is
rounded half-to-even to 2 decimal places at the final output only.
"""
from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from decimal import Decimal, ROUND_HALF_EVEN
from typing import TYPE_CHECKING, Optional, Sequence

from app.models.analytics import CategoryCount, CombinedReport, PriceRangeCount, SaleSummary

if TYPE_CHECKING:
    from app.models.transaction import Transaction

CENTS = Decimal("0.01")

# Inclusive lower bound of each bucket; the last one is open-ended.
PRICE_RANGE_BOUNDS: tuple[int, ...] = (1, 101, 201, 301, 401, 501, 601, 701, 801, 901)
PRICE_RANGE_LABELS: tuple[str, ...] = (
    "1-100",
    "101-200",
    "201-300",
    "301-400",
    "401-500",
    "501-600",
    "601-700",
    "701-800",
    "801-900",
    "901-above",
)


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_EVEN)


def total_sale_amount(transactions: Sequence["Transaction"]) -> Decimal:
    """
    Sum of prices, rounded to cents. Transactions without a price are skipped.

    Example:
        prices [50, 150, None] → 200.00
    """
    total = sum(
        (txn.price for txn in transactions if txn.price is not None),
        Decimal("0"),
    )
    return _quantize(total)


def count_by_sold_flag(transactions: Sequence["Transaction"], sold: bool) -> int:
    """Count transactions whose `sold` flag is exactly `sold`. Missing flags never count."""
    return sum(1 for txn in transactions if txn.sold is sold)


def summarize(transactions: Sequence["Transaction"]) -> SaleSummary:
    return SaleSummary(
        total_sale_amount=total_sale_amount(transactions),
        total_sold_items=count_by_sold_flag(transactions, True),
        total_not_sold_items=count_by_sold_flag(transactions, False),
    )


def price_bucket(price: Optional[Decimal]) -> Optional[int]:
    """
    Index into PRICE_RANGE_LABELS for `price`, or None when it is not bucketed.

    Prices below 1 (and missing prices) fall outside every bucket. A price
    between two bounds belongs to the greater lower bound not above it, so
    100.50 lands in "1-100".
    """
    if price is None:
        return None
    index = bisect_right(PRICE_RANGE_BOUNDS, price) - 1
    return index if index >= 0 else None


def price_range_histogram(transactions: Sequence["Transaction"]) -> list[PriceRangeCount]:
    """Count transactions per price range. All ten ranges are returned in order."""
    counts = [0] * len(PRICE_RANGE_LABELS)
    for txn in transactions:
        index = price_bucket(txn.price)
        if index is not None:
            counts[index] += 1
    return [
        PriceRangeCount(price_range=label, number_of_items=count)
        for label, count in zip(PRICE_RANGE_LABELS, counts)
    ]


def category_breakdown(transactions: Sequence["Transaction"]) -> list[CategoryCount]:
    """
    Count transactions per category, highest count first.

    Ties keep the order in which the categories were first seen. A missing
    category is grouped under None.
    """
    counts = Counter(txn.category for txn in transactions)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CategoryCount(category=category, number_of_items=count) for category, count in ranked]


def combine(transactions: Sequence["Transaction"]) -> CombinedReport:
    """Every aggregate over the same snapshot, so the parts always agree."""
    return CombinedReport(
        transactions=list(transactions),
        stats=summarize(transactions),
        price_ranges=price_range_histogram(transactions),
        categories=category_breakdown(transactions),
    )
