"""
Monthly analytics endpoints.

GET /api/v1/stats/{month}, /price-range/{month}, /categories/{month},
/combined-data/{month}, and /search?month=&searchText=

Months arrive as raw strings; the engine validates them so that "abc", "0"
and "13" all produce the same 400 INVALID_MONTH error.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.engine.analytics import AnalyticsEngine
from app.routes.dependencies import get_engine

router = APIRouter(prefix="/api/v1", tags=["analytics"])


@router.get("/stats/{month}")
async def get_stats(month: str, engine: AnalyticsEngine = Depends(get_engine)) -> dict:
    """Total sale amount plus sold and not-sold item counts for a month."""
    return engine.summary(month).model_dump(mode="json", by_alias=True)


@router.get("/price-range/{month}")
async def get_price_ranges(month: str, engine: AnalyticsEngine = Depends(get_engine)) -> list[dict]:
    """Item counts for the ten fixed price ranges, "1-100" through "901-above"."""
    return [r.model_dump(mode="json", by_alias=True) for r in engine.histogram(month)]


@router.get("/categories/{month}")
async def get_categories(month: str, engine: AnalyticsEngine = Depends(get_engine)) -> list[dict]:
    """Item counts per category, most populated first."""
    return [c.model_dump(mode="json", by_alias=True) for c in engine.by_category(month)]


@router.get("/search")
async def search_transactions(
    month: Optional[str] = None,
    search_text: Optional[str] = Query(None, alias="searchText"),
    engine: AnalyticsEngine = Depends(get_engine),
) -> list[dict]:
    """Search a month's transactions by title, description, category, or exact price.

    When nothing matches, every transaction of the month is returned.
    """
    results = engine.search(month, search_text)
    return [t.model_dump(mode="json", by_alias=True) for t in results]


@router.get("/combined-data/{month}")
async def get_combined_data(month: str, engine: AnalyticsEngine = Depends(get_engine)) -> dict:
    """Transactions, stats, price ranges, and categories computed from one snapshot."""
    return engine.combined(month).model_dump(mode="json", by_alias=True)
