from .transaction import Transaction, Money
from .analytics import SaleSummary, PriceRangeCount, CategoryCount, CombinedReport

__all__ = [
    "Transaction", "Money",
    "SaleSummary", "PriceRangeCount", "CategoryCount", "CombinedReport",
]
