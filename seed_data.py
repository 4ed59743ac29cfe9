"""
Seed loader for the sales transaction analytics service.

Fetches the product transaction dataset once (remote JSON over HTTP, or a
local JSON file) and loads it into the record store.
Run via: python seed_data.py (standalone) or called by app startup.
"""
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Iterable, Optional

import httpx
from pydantic import ValidationError

from app import config
from app.engine.month_filter import sale_month
from app.models.transaction import Transaction
from app.repository.store import RecordStore, store as default_store

logger = logging.getLogger(__name__)

# Source keys copied onto each Transaction
SOURCE_FIELDS = ("id", "title", "price", "description", "category", "image", "sold", "dateOfSale")


class SeedError(Exception):
    """Raised when the seed source cannot be read. Startup treats it as fatal."""


def fetch_source_records(
    url: str,
    timeout: float = config.SEED_TIMEOUT_SECONDS,
    client: Optional[httpx.Client] = None,
) -> list[dict[str, Any]]:
    """
    Download the raw records from `url`.

    Args:
        url: Address of a JSON array of transaction objects.
        timeout: Request timeout in seconds (ignored when `client` is given).
        client: Optional pre-built client, mainly for tests.

    Returns:
        The decoded JSON array.

    Raises:
        SeedError: On transport errors, non-2xx responses, or a non-array body.
    """
    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = http.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        raise SeedError(f"Could not fetch seed data from {url}: {exc}") from exc
    except ValueError as exc:
        raise SeedError(f"Seed source {url} did not return JSON") from exc
    finally:
        if owns_client:
            http.close()

    return _require_array(payload, url)


def read_source_file(path: str | Path) -> list[dict[str, Any]]:
    """Read the raw records from a local JSON file."""
    try:
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
    except OSError as exc:
        raise SeedError(f"Could not read seed file {path}: {exc}") from exc
    except ValueError as exc:
        raise SeedError(f"Seed file {path} is not valid JSON") from exc
    return _require_array(payload, str(path))


def _require_array(payload: Any, source: str) -> list[dict[str, Any]]:
    if not isinstance(payload, list):
        raise SeedError(f"Seed source {source} must be a JSON array, got {type(payload).__name__}")
    return payload


def parse_records(raw_records: Iterable[Any]) -> list[Transaction]:
    """
    Build Transactions from raw source objects.

    Records that are not objects or fail validation (e.g. a negative or
    non-numeric price) are skipped and logged; the rest keep source order.
    """
    transactions = []
    for position, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            logger.warning("Skipping seed record #%d: expected an object, got %s", position, type(raw).__name__)
            continue
        fields = {key: raw[key] for key in SOURCE_FIELDS if key in raw}
        try:
            transactions.append(Transaction.model_validate(fields))
        except ValidationError as exc:
            logger.warning(
                "Skipping seed record #%d (id=%r): %d invalid field(s)",
                position, raw.get("id"), exc.error_count(),
            )
    return transactions


def _read_configured_source() -> list[dict[str, Any]]:
    if config.SEED_FILE:
        logger.info("Reading seed data from file %s", config.SEED_FILE)
        return read_source_file(config.SEED_FILE)
    logger.info("Fetching seed data from %s", config.SEED_SOURCE_URL)
    return fetch_source_records(config.SEED_SOURCE_URL)


def load_seed_data(
    target: RecordStore = default_store,
    raw_records: Optional[Iterable[Any]] = None,
) -> int:
    """
    Populate `target` once. Returns the number of transactions loaded.

    Without `raw_records` the source comes from configuration (SEED_FILE,
    then SEED_SOURCE_URL). Raises SeedError if the source is unreadable and
    StoreAlreadySeeded if `target` was seeded before.
    """
    if raw_records is None:
        raw_records = _read_configured_source()
    transactions = parse_records(raw_records)
    loaded = target.load(transactions)
    logger.info("Seeded record store with %d transactions", loaded)
    return loaded


if __name__ == "__main__":
    from app.logging_config import setup_logging

    setup_logging()
    load_seed_data()
    all_txns = default_store.list_all()
    by_month = Counter(sale_month(txn) for txn in all_txns)
    print(f"Loaded {len(all_txns)} transactions:")
    for month in sorted(m for m in by_month if m is not None):
        print(f"  month {month:02d}: {by_month[month]} transactions")
    if None in by_month:
        print(f"  no sale date: {by_month[None]} transactions")
