"""
VoiceFlex ASGI application.

Run with ``uvicorn src.main:app``. Startup creates the tables when the
database is SQLite; PostgreSQL schemas are managed by Alembic.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.engine import make_url

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger = get_logger()
    database = get_database()

    if make_url(settings.database_url).get_backend_name() == "sqlite":
        await database.create_all()

    logger.info(
        "Application started",
        environment=settings.environment.value,
        version=settings.app_version,
    )
    try:
        yield
    finally:
        await database.close()
        logger.info("Application stopped")


app = FastAPI(
    title=settings.app_name,
    description="Telephony accounts and phone number management",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(TraceMiddleware)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
