"""Portfolio Counter API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CounterError → {success: false, message}
    - CORS configured from settings (any origin by default)
    - Tables ensured on startup before any request is served; failure exits
    - Every pooled connection released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, projects, tabs, views
from app.config import get_settings
from app.infrastructure.database import bootstrap_database, close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        use_ssl=settings.database_ssl,
    )
    await bootstrap_database()
    logger.info("Portfolio counter API started")
    yield
    logger.info("Portfolio counter API shutting down")
    await close_db()


app = FastAPI(
    title="Portfolio Counter API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(views.router)
app.include_router(projects.router)
app.include_router(tabs.router)

register_error_handlers(app)
