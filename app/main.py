"""
FastAPI application entry point.

Registers middleware (in order), routes, exception handlers, and the store
lifecycle: seed once at startup, close at shutdown.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from app import config
from app.config import is_production, get_cors_origins
from app.engine.analytics import AnalyticsEngine
from app.engine.errors import AnalyticsError, StoreUnavailable
from app.logging_config import setup_logging
from app.middleware import (
    SecurityHeadersMiddleware,
    RequestIDMiddleware,
    StructuredLoggingMiddleware,
)
from app.repository.store import RecordStore, store as default_store
from app.routes.analytics import router as analytics_router
from app.routes.health import router as health_router
from app.routes.transactions import router as transactions_router
from seed_data import load_seed_data

logger = logging.getLogger(__name__)


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    target = store if store is not None else default_store

    # ── Lifecycle: seed once at startup, close at shutdown ──────────────────
    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if config.SEED_ON_STARTUP and not target.is_seeded:
            # Any SeedError propagates and aborts startup
            load_seed_data(target)
        yield
        target.close()

    docs_url = None if is_production() else "/docs"
    redoc_url = None if is_production() else "/redoc"

    application = FastAPI(
        title="Sales Transaction Analytics Service",
        description="Monthly revenue, price-range, category, and search analytics over seeded sales records.",
        version="1.0.0",
        docs_url=docs_url,
        redoc_url=redoc_url,
        lifespan=lifespan,
    )

    application.state.store = target
    application.state.engine = AnalyticsEngine(target)

    # ── Middleware stack (last added runs first) ────────────────────────────
    application.add_middleware(SecurityHeadersMiddleware)
    application.add_middleware(StructuredLoggingMiddleware)
    application.add_middleware(RequestIDMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # ── Routes ──────────────────────────────────────────────────────────────
    application.include_router(transactions_router)
    application.include_router(analytics_router)
    application.include_router(health_router)

    # ── Exception handlers ───────────────────────────────────────────────────
    @application.exception_handler(AnalyticsError)
    async def analytics_error_handler(request: Request, exc: AnalyticsError):
        if isinstance(exc, StoreUnavailable):
            logger.error("Store unavailable on %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": {"code": exc.code, "message": exc.message}},
        )

    @application.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Never leak stack traces to clients."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}},
        )

    return application


setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT)
