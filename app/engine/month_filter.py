"""
Month filter — selects transactions by month-of-year, ignoring the year.

Sale dates are compared in UTC; naive timestamps are taken as already UTC.
"""
import re
from datetime import datetime, timezone
from typing import Iterable, Optional

from app.engine.errors import InvalidMonth
from app.models.transaction import Transaction

# ASCII digits only: int() would also take "1_2" and non-Latin digits
_PLAIN_INTEGER = re.compile(r"[+-]?[0-9]+")


def validate_month(value: object) -> int:
    """
    Coerce a caller-supplied month to an int in 1..12.

    Accepts ints and integer strings (e.g. "3", " 03 "). Booleans, floats,
    None and anything unparsable raise InvalidMonth.
    """
    if isinstance(value, bool):
        raise InvalidMonth(value)
    if isinstance(value, int):
        month = value
    elif isinstance(value, str):
        text = value.strip()
        if not _PLAIN_INTEGER.fullmatch(text):
            raise InvalidMonth(value)
        month = int(text)
    else:
        raise InvalidMonth(value)

    if not 1 <= month <= 12:
        raise InvalidMonth(value)
    return month


def sale_month(transaction: Transaction) -> Optional[int]:
    """Return the UTC month of the sale date, or None when it is missing."""
    sold_at: Optional[datetime] = transaction.date_of_sale
    if sold_at is None:
        return None
    if sold_at.tzinfo is not None:
        sold_at = sold_at.astimezone(timezone.utc)
    return sold_at.month


def matches_month(transaction: Transaction, month: int) -> bool:
    return sale_month(transaction) == month


def filter_by_month(transactions: Iterable[Transaction], month: int) -> list[Transaction]:
    """Keep the transactions sold in `month` of any year, preserving order."""
    return [txn for txn in transactions if matches_month(txn, month)]
