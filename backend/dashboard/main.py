"""Invoice Dashboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError -> structured JSON responses
    - CORS and session cookie configured from settings (not hardcoded)
    - Database pool opened on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: explicit open/close of the shared pool
    - SessionMiddleware added last so it wraps every route and the access dependency
      can read request.session
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from dashboard.api.error_handlers import register_error_handlers
from dashboard.api.routes import auth, health, invoices
from dashboard.config import get_settings
from dashboard.infrastructure.database import close_db, init_db
from dashboard.infrastructure.observability import setup_logging

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
        ssl=settings.database_ssl,
    )
    logger.info("Invoice dashboard started")
    yield
    await close_db()
    logger.info("Invoice dashboard shut down")


app = FastAPI(
    title="Invoice Dashboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    max_age=settings.session_max_age_seconds,
    same_site="lax",
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(invoices.router)

register_error_handlers(app)
