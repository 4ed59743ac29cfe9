"""Shared fixtures for all test modules."""
import os
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "development")
os.environ["SEED_ON_STARTUP"] = "false"

from app.engine.analytics import AnalyticsEngine
from app.main import create_app
from app.repository.store import InMemoryStore
from seed_data import load_seed_data


# Raw records shaped like the upstream product_transaction.json feed.
# January (any year, UTC): ids 1, 2, 3, 4, 5, 8. Id 8 is Feb 1 in +05:30, Jan 31 in UTC.
SAMPLE_RECORDS = [
    {"id": 1, "title": "Mens Casual Slim Fit", "price": 50, "description": "Slim-fitting style",
     "category": "men's clothing", "image": "https://img.example/1.jpg", "sold": True,
     "dateOfSale": "2021-01-15T10:00:00+00:00"},
    {"id": 2, "title": "Womens Rain Jacket", "price": 150, "description": "Lightweight and waterproof",
     "category": "women's clothing", "image": "https://img.example/2.jpg", "sold": False,
     "dateOfSale": "2022-01-03T08:30:00+00:00"},
    {"id": 3, "title": "Solid Gold Ring", "price": 999.99, "description": "Classic created wedding ring",
     "category": "jewelery", "image": "https://img.example/3.jpg", "sold": True,
     "dateOfSale": "2021-01-20T12:00:00+00:00"},
    {"id": 4, "title": "USB Flash Drive", "price": 0.5, "description": "Compact storage stick",
     "category": "electronics", "image": "https://img.example/4.jpg", "sold": False,
     "dateOfSale": "2022-01-28T18:45:00+00:00"},
    {"id": 5, "title": "Gaming Monitor", "price": 100.5, "description": "Ultra-wide curved screen",
     "category": "electronics", "image": "https://img.example/5.jpg", "sold": True,
     "dateOfSale": "2021-01-09T09:15:00+00:00"},
    {"id": 6, "title": "Backpack Fjallraven", "price": 109.95, "description": "Fits 15 inch laptops",
     "category": "men's clothing", "image": "https://img.example/6.jpg", "sold": True,
     "dateOfSale": "2022-03-27T20:29:54+05:30"},
    {"id": 7, "title": "Silver Bracelet", "price": 695, "description": "Sterling silver",
     "category": "jewelery", "image": "https://img.example/7.jpg", "sold": False,
     "dateOfSale": "2021-03-01T11:00:00+00:00"},
    {"id": 8, "title": "Portable Hard Drive", "price": 64, "description": "Portable external storage",
     "category": "electronics", "image": "https://img.example/8.jpg", "sold": True,
     "dateOfSale": "2021-02-01T02:00:00+05:30"},
    # July, with no price, sold flag, or category
    {"id": 9, "title": "Mystery Box", "description": "Contents unknown",
     "dateOfSale": "2021-07-10T10:00:00+00:00"},
    # Rejected at seed time
    {"id": 10, "title": "Broken Price", "price": "abc", "sold": True,
     "dateOfSale": "2021-01-05T10:00:00+00:00"},
    {"id": 11, "title": "Negative Price", "price": -5, "sold": True,
     "dateOfSale": "2021-01-06T10:00:00+00:00"},
]

JANUARY_IDS = {1, 2, 3, 4, 5, 8}


@pytest.fixture
def store():
    """A fresh store seeded with SAMPLE_RECORDS for each test."""
    fresh = InMemoryStore()
    load_seed_data(fresh, SAMPLE_RECORDS)
    yield fresh
    fresh.close()


@pytest.fixture
def engine(store):
    return AnalyticsEngine(store)


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store), raise_server_exceptions=False)
