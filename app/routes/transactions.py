"""Transaction endpoints — GET /api/v1/transactions"""
from fastapi import APIRouter, Depends

from app.engine.errors import StoreUnavailable
from app.repository.store import RecordStore
from app.routes.dependencies import get_store

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


@router.get("")
async def list_transactions(store: RecordStore = Depends(get_store)) -> list[dict]:
    """List every seeded transaction, in source order."""
    try:
        txns = store.list_all()
    except StoreUnavailable:
        raise
    except Exception as exc:
        raise StoreUnavailable(f"Record store failed: {exc}") from exc
    return [t.model_dump(mode="json", by_alias=True) for t in txns]
