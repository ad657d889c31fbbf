"""Sofia Blend API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SofiaError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - No database: profiles and recipes are persisted by the client app, the API is stateless
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sofia_blend.api.error_handlers import register_error_handlers
from sofia_blend.api.routes import flower, health, questionnaire, recipes
from sofia_blend.config import get_settings
from sofia_blend.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    logger.info("Sofia Blend API started")
    yield
    logger.info("Sofia Blend API shutting down")
    logging.root.removeHandler(handler)


settings = get_settings()
app = FastAPI(
    title="Sofia Blend API", version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(flower.router)
app.include_router(recipes.router)
app.include_router(questionnaire.router)

register_error_handlers(app)
