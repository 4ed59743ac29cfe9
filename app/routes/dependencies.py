"""Request-scoped access to the store and engine held on app.state."""
from fastapi import Request

from app.engine.analytics import AnalyticsEngine
from app.repository.store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_engine(request: Request) -> AnalyticsEngine:
    return request.app.state.engine
