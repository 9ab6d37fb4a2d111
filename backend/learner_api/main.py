"""Learner API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery); health before learners so
      /{learner_id} never shadows a fixed path
    - Global error handlers registered through api/error_handlers.py
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager built in lifespan, held on app.state.db_manager,
      disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: one place for init and teardown
    - Demo seeding is opt-in (SEED_DEMO_LEARNER) so a fresh database stays empty
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learner_api.api.error_handlers import register_error_handlers
from learner_api.api.routes import health, learners
from learner_api.config import get_settings
from learner_api.infrastructure.database import DatabaseSessionManager
from learner_api.infrastructure.learner_store import SqlLearnerStore
from learner_api.infrastructure.observability import setup_logging
from learner_api.services.demo_learner import seed_demo_learner

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.db_manager = db_manager
    if settings.seed_demo_learner:
        async with db_manager.session() as db:
            await seed_demo_learner(SqlLearnerStore(db))
    logger.info(f"Server is running on port: {settings.port}")
    yield
    logger.info("Learner API shutting down")
    await db_manager.close()
    app.state.db_manager = None


app = FastAPI(
    title="Learner API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(learners.router)


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
