"""FastAPI application factory wiring routes, services, and shared state."""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from dayscore.api import routes_entries, routes_health
from dayscore.api.errors import register_exception_handlers
from dayscore.core.clock import make_clock
from dayscore.core.config import Settings, get_settings
from dayscore.core.db import Database
from dayscore.models import entry  # noqa: F401 - ensure models are registered
from dayscore.repositories.entry_repository import EntryRepository
from dayscore.services.entry_service import EntryService
from dayscore.services.identity_service import HttpIdentityResolver, IdentityResolver

LOGGER = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    identity_resolver: Optional[IdentityResolver] = None,
    clock: Optional[Callable[[], str]] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if settings.auth_required:
        identity_resolver = identity_resolver or HttpIdentityResolver.from_settings(settings)
    else:
        identity_resolver = None

    # Store handle lives exactly as long as the app
    database = Database.from_settings(settings)
    database.create_all()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        LOGGER.info("✅ Day score API ready (auth=%s)", settings.DAYSCORE_AUTH_MODE)
        yield
        app.state.database.dispose()

    app = FastAPI(title="Day Score Journal API", version="0.1.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.database = database
    app.state.identity_resolver = identity_resolver
    app.state.entry_service = EntryService(
        EntryRepository(),
        clock or make_clock(settings.DAYSCORE_TIMEZONE),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.DAYSCORE_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(routes_entries.router)
    app.include_router(routes_health.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app


if __name__ == "__main__":
    import uvicorn

    conf = get_settings()
    uvicorn.run(create_app(conf), host=conf.DAYSCORE_HOST, port=conf.DAYSCORE_PORT)
