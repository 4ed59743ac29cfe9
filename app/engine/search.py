"""
Search matcher — text and price matching within one month's transactions.

When a query matches nothing, the whole month is returned instead of an
empty list. Callers cannot tell a miss from an unfiltered listing.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from app.models.transaction import Transaction

_TEXT_FIELDS = ("title", "description", "category")
# Plain ASCII decimal or exponent notation; no "1_0" grouping or non-Latin digits
_PLAIN_NUMBER = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_search_number(text: str) -> Optional[Decimal]:
    """Return the query as a finite Decimal, or None if it is not numeric."""
    text = text.strip()
    if not _PLAIN_NUMBER.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def matches_query(transaction: Transaction, needle: str, number: Optional[Decimal]) -> bool:
    """
    Case-insensitive substring match on title, description and category, or
    exact price equality when the query is numeric. `needle` must already be
    casefolded.
    """
    for field in _TEXT_FIELDS:
        value = getattr(transaction, field)
        if value and needle in value.casefold():
            return True
    return number is not None and transaction.price is not None and transaction.price == number


def search_transactions(
    month_transactions: Sequence[Transaction],
    text: Optional[str] = None,
) -> list[Transaction]:
    """
    Filter an already month-filtered set by `text`.

    No text (None or "") returns the set unchanged; a query with no hits
    falls back to the full set as well.
    """
    if not text:
        return list(month_transactions)

    needle = text.casefold()
    number = parse_search_number(text)
    matched = [txn for txn in month_transactions if matches_query(txn, needle, number)]
    return matched or list(month_transactions)
