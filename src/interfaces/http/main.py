from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.application.use_cases.breeds import import_breeds
from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
    create_session_factory,
)
from src.interfaces.http.routers import breeds
from src.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


async def _bootstrap(app: FastAPI) -> None:
    settings: Settings = app.state.settings
    if settings.auto_create_schema:
        await create_schema(app.state.engine)
    if settings.breeds_csv_path:
        # Any import error propagates and aborts startup
        async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
            await import_breeds.execute(uow, settings.breeds_csv_path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await _bootstrap(app)
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(name).setLevel(level)


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Breeds Service",
        version="0.1.0",
        description="CRUD and search API over pet breeds",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    register_error_handlers(app)

    app.include_router(breeds.router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
