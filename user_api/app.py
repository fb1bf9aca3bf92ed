"""FastAPI application exposing the user resource."""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from user_api.core.config import get_settings
from user_api.core.logging import configure_logging
from user_api.db.create_tables import create_all
from user_api.domain.errors import UserError
from user_api.routers import users as users_router
from user_api.services.user_service import UserService


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_all()
    logger.info("User API ready")
    yield


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title="User API",
        lifespan=lifespan,
        docs_url=None if settings.app_env == "prod" else "/docs",
        redoc_url=None if settings.app_env == "prod" else "/redoc",
    )
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.state.user_service = UserService()
    app.include_router(users_router.router)

    @app.exception_handler(UserError)
    async def handle_user_error(_: Request, exc: UserError):
        return JSONResponse(
            {"ok": False, "error": exc.code, "message": exc.message},
            status_code=exc.status_code,
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(request: Request, exc: SQLAlchemyError):
        logger.opt(exception=exc).error("Storage failure on {} {}", request.method, request.url.path)
        return JSONResponse(
            {"ok": False, "error": "storage_failure", "message": "Storage backend unavailable."},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return app


__all__ = ["create_app"]
