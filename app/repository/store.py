"""
In-memory record store with thread-safe operations.

No business logic, only data access primitives. The store is seeded once,
read-only afterwards, and closed at shutdown; it is never reopened.
"""
import threading
from typing import Iterable, Protocol

from app.engine.errors import StoreUnavailable
from app.engine.month_filter import filter_by_month
from app.models.transaction import Transaction


class StoreAlreadySeeded(Exception):
    """Raised when a second seed is attempted on the same store."""


class RecordStore(Protocol):
    """
    What the app needs from a store: seed once, read, report readiness, close.

    The engine only calls `list_all`, plus `list_by_month` when the store
    provides one.
    """

    @property
    def is_seeded(self) -> bool: ...

    @property
    def is_closed(self) -> bool: ...

    def load(self, transactions: Iterable[Transaction]) -> int: ...

    def list_all(self) -> list[Transaction]: ...

    def count(self) -> int: ...

    def close(self) -> None: ...


class InMemoryStore:
    """Thread-safe in-memory store for seeded transactions."""

    def __init__(self):
        self._lock = threading.Lock()
        self._transactions: tuple[Transaction, ...] = ()
        self._seeded = False
        self._closed = False

    # ── Lifecycle ───────────────────────────────────────────────────────────

    @property
    def is_seeded(self) -> bool:
        return self._seeded

    @property
    def is_closed(self) -> bool:
        return self._closed

    def load(self, transactions: Iterable[Transaction]) -> int:
        """One-time seed. Returns the number of records stored."""
        with self._lock:
            if self._closed:
                raise StoreUnavailable("Record store is closed")
            if self._seeded:
                raise StoreAlreadySeeded("Record store has already been seeded")
            self._transactions = tuple(transactions)
            self._seeded = True
            return len(self._transactions)

    def close(self) -> None:
        with self._lock:
            self._closed = True
            self._transactions = ()

    # ── Reads ───────────────────────────────────────────────────────────────

    def _snapshot(self) -> tuple[Transaction, ...]:
        with self._lock:
            if self._closed:
                raise StoreUnavailable("Record store is closed")
            if not self._seeded:
                raise StoreUnavailable("Record store has not been seeded yet")
            return self._transactions

    def list_all(self) -> list[Transaction]:
        return list(self._snapshot())

    def list_by_month(self, month: int) -> list[Transaction]:
        """Same result as filtering list_all() by month-of-year."""
        return filter_by_month(self._snapshot(), month)

    def count(self) -> int:
        return len(self._snapshot())


# Process-wide default; seeded at startup, closed at shutdown
store = InMemoryStore()
