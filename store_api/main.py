"""Store API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"message": str}
    - CORS configured from settings (not hardcoded)
    - Database pool created on startup and disposed on shutdown via the lifespan

Design Decisions:
    - Lifespan over @app.on_event: one place owns the pool's whole lifecycle
    - run() reads host/port from settings so `store-api` needs no CLI flags
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from store_api.api.error_handlers import register_error_handlers
from store_api.api.middleware import register_middleware
from store_api.api.routes import auth, categories, health, products, users
from store_api.config import get_settings
from store_api.infrastructure.database import close_db, init_db
from store_api.infrastructure.observability import setup_logging

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
    )
    logger.info("Store API started")
    yield
    await close_db()
    logger.info("Store API shut down")


app = FastAPI(title="Store API", version="1.0.0", lifespan=lifespan)

# Added first so CORSMiddleware ends up outermost and wraps every response
register_middleware(app)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(products.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "store_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
