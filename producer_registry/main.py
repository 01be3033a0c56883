"""Producer Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProducerRegistryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager constructed in the lifespan, stored on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event
    - Tables created at startup only when DATABASE_CREATE_TABLES is on (no migrations)
    - A failed table bootstrap is logged; the process still starts
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from producer_registry.api.error_handlers import register_error_handlers
from producer_registry.api.routes import dashboard, health, producers
from producer_registry.config import get_settings
from producer_registry.core.errors import DatabaseError
from producer_registry.infrastructure.database import init_db
from producer_registry.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        try:
            await db_manager.create_tables()
        except DatabaseError as e:
            # Keep serving: requests answer 500 and /health/ready 503 until the DB is back
            logger.error(
                f"Starting without schema bootstrap: {e.message}",
                extra={"error_code": e.code, "operation": e.operation},
            )
    app.state.db_manager = db_manager
    logger.info(f"Producer Registry API listening on port {settings.port}")
    try:
        yield
    finally:
        logger.info("Producer Registry API shutting down")
        await db_manager.close()
        app.state.db_manager = None


app = FastAPI(
    title="Producer Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(producers.router)
app.include_router(dashboard.router)

register_error_handlers(app)
