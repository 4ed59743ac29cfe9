"""Health probe — GET /api/v1/health"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.repository.store import RecordStore
from app.routes.dependencies import get_store

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("")
async def health_check(store: RecordStore = Depends(get_store)):
    """200 once the store is seeded and open, 503 otherwise."""
    if not store.is_seeded or store.is_closed:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "transactions": 0},
        )
    return {"status": "ok", "transactions": store.count()}
