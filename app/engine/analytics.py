"""
Analytics engine — the five monthly queries over a record store.

Every operation validates the month before touching the store, takes exactly
one snapshot, and has no side effects, so calls may run concurrently.
"""
from typing import TYPE_CHECKING, Optional

from app.engine.aggregator import category_breakdown, combine, price_range_histogram, summarize
from app.engine.errors import StoreUnavailable
from app.engine.month_filter import filter_by_month, validate_month
from app.engine.search import search_transactions
from app.models.analytics import CategoryCount, CombinedReport, PriceRangeCount, SaleSummary
from app.models.transaction import Transaction

if TYPE_CHECKING:
    from app.repository.store import RecordStore


class AnalyticsEngine:
    """Facade composing the month filter, aggregator, and search matcher."""

    def __init__(self, store: "RecordStore"):
        self._store = store

    def _month_snapshot(self, month: int) -> list[Transaction]:
        """
        Fetch one month's transactions from the store.

        Uses the store's own month filter when it has one. Any store failure
        is reported as StoreUnavailable; nothing partial is returned.
        """
        list_by_month = getattr(self._store, "list_by_month", None)
        try:
            if list_by_month is not None:
                return list(list_by_month(month))
            everything = self._store.list_all()
        except StoreUnavailable:
            raise
        except Exception as exc:
            raise StoreUnavailable(f"Record store failed: {exc}") from exc
        return filter_by_month(everything, month)

    def summary(self, month: object) -> SaleSummary:
        """Revenue and sold/unsold counts for a month."""
        month = validate_month(month)
        return summarize(self._month_snapshot(month))

    def histogram(self, month: object) -> list[PriceRangeCount]:
        """Ten fixed price ranges with item counts, zero-filled."""
        month = validate_month(month)
        return price_range_histogram(self._month_snapshot(month))

    def by_category(self, month: object) -> list[CategoryCount]:
        month = validate_month(month)
        return category_breakdown(self._month_snapshot(month))

    def search(self, month: object, text: Optional[str] = None) -> list[Transaction]:
        """Month transactions matching `text`; falls back to the whole month."""
        month = validate_month(month)
        return search_transactions(self._month_snapshot(month), text)

    def combined(self, month: object) -> CombinedReport:
        month = validate_month(month)
        return combine(self._month_snapshot(month))
