"""FastAPI application factory wiring routes, services, and shared state."""
from __future__ import annotations

import logging
import time
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from unisandbox.api import routes_health, routes_users
from unisandbox.core.config import Settings, get_settings
from unisandbox.core.db import Base, engine
from unisandbox.models import user  # noqa: F401 - ensure models are registered
from unisandbox.repositories.user_repository import UserRepository
from unisandbox.services.user_service import UserService

LOGGER = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    app = FastAPI(title="Unisandbox Demo", version="0.1.0")

    # Initialize persistence and services
    Base.metadata.create_all(bind=engine)
    app.state.user_service = UserService(UserRepository())

    if settings.CORS_ALLOW_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ALLOW_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    api = APIRouter(prefix=settings.API_PREFIX)
    api.include_router(routes_users.router)
    api.include_router(routes_health.router)
    app.include_router(api)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        LOGGER.warning("Integrity violation on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": "Constraint violation"})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        LOGGER.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage failure"},
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("%s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("unisandbox.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
