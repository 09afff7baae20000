"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.routers import bookmarks, health
from core.auth import require_api_token
from core.config import get_settings
from db.session import dispose_engine


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - release database connections on shutdown."""
    logger.info("Bookmarks API starting")
    yield
    await dispose_engine()
    logger.info("Bookmarks API stopped")


app = FastAPI(
    title="Bookmarks API",
    description="Store, list and delete rated bookmarks.",
    version="0.1.0",
    lifespan=lifespan,
    # Every route requires the bearer token
    dependencies=[Depends(require_api_token)],
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router)
