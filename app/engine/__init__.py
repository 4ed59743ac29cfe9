from .analytics import AnalyticsEngine
from .errors import AnalyticsError, InvalidMonth, StoreUnavailable
from .month_filter import validate_month, filter_by_month

__all__ = [
    "AnalyticsEngine",
    "AnalyticsError",
    "InvalidMonth",
    "StoreUnavailable",
    "validate_month",
    "filter_by_month",
]
