"""FastAPI application factory. No business logic; only wiring, middleware and error translation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from myflix import __version__
from myflix.api.v1 import router as v1_router
from myflix.core.config import Settings, get_settings
from myflix.core.context import build_context
from myflix.core.exceptions import AuthenticationError, DependencyError, MyFlixError
from myflix.core.logging import AccessLogMiddleware, configure_logging
from myflix.models import Base

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to myFlix! Go to /docs to view the documentation."


def _validation_items(exc: RequestValidationError) -> list[dict[str, Any]]:
    # Drop "input": it may echo a raw password back to the client.
    return [
        {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "message": err.get("msg", "")}
        for err in exc.errors()
    ]


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MyFlixError)
    async def myflix_exception_handler(request: Request, exc: MyFlixError) -> JSONResponse:
        headers = None
        if isinstance(exc, DependencyError):
            logger.error(
                "Dependency failure on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
                exc_info=exc,
                extra={"error_code": exc.error_code, "detail": exc.detail},
            )
        elif isinstance(exc, AuthenticationError) and exc.http_status_code == 401:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.http_status_code,
            content=exc.to_dict(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error_code": "VALIDATION_ERROR",
                "message": "Request validation failed.",
                "detail": {"errors": _validation_items(exc)},
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(
            "Store failure on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content=DependencyError("store failure").to_dict())


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the application. Raises ConfigurationError when JWT_SECRET is missing,
    so a misconfigured process fails at startup rather than per request.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    context = build_context(settings, engine=engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Dev convenience; production schemas are managed by Alembic.
        if settings.APP_ENV == "dev":
            Base.metadata.create_all(context.engine)
        logger.info("myFlix API started", extra={"environment": settings.APP_ENV})
        yield
        context.engine.dispose()

    app = FastAPI(
        title="myFlix API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)

    app.include_router(v1_router, prefix=settings.API_PREFIX)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        """Root route; minimal payload for discovery."""
        return WELCOME_TEXT

    return app
