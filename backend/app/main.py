"""Twitter API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TwitterApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and tables created on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static assets mounted under /static so unmatched API paths stay route misses (404)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.routes import feed, health, tweets, users
from app.api.routes.feed import STATIC_DIR

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_tables()
    logger.info("Twitter API started")
    yield
    await manager.dispose()
    logger.info("Twitter API shutting down")


app = FastAPI(
    title="Twitter API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tweets.router)
app.include_router(users.router)
app.include_router(feed.router)

register_error_handlers(app)

# Assets under a dedicated prefix; index.html is served by feed.index_page
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
