"""Blog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the uniform error envelope
    - CORS configured from settings (not hardcoded)
    - Startup builds, in order: logging, database manager, schema, then the
      repository -> mapper -> service graph stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: cleaner paired startup/shutdown
    - Object graph assembled explicitly by api.dependencies.build_post_service;
      no container, no module-level service instances
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.dependencies import build_post_service
from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routes import health, posts
from blog_api.config import get_settings
from blog_api.infrastructure.database import init_db
from blog_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    await db.create_schema()
    app.state.post_service = build_post_service(db)
    logger.info("Blog API started")
    yield
    logger.info("Blog API shutting down")
    await db.dispose()


settings = get_settings()
app = FastAPI(
    title="Blog API", version=settings.version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(posts.router)

register_error_handlers(app)
