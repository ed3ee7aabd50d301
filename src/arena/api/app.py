"""FastAPI application wiring for Arena."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from arena.api import routes
from arena.api.runtime import ApiState, build_state
from arena.config import get_settings
from arena.domain.battle import RoundLimitExceeded
from arena.services import (
    BattleRequestError,
    CharacterConflictError,
    CharacterNotFoundError,
    CharacterValidationError,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: list[object] | None = None,
) -> JSONResponse:
    """Build the structured error body every failing endpoint returns."""

    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details,
                "timestamp": datetime.now(UTC).isoformat(),
                "path": request.url.path,
            }
        },
    )


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CharacterValidationError)
    async def _validation(request: Request, exc: CharacterValidationError) -> JSONResponse:
        return error_response(
            request, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", str(exc), list(exc.details)
        )

    @app.exception_handler(RequestValidationError)
    async def _schema(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = [error.get("msg", "invalid value") for error in exc.errors()]
        return error_response(
            request, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Validation failed", details
        )

    @app.exception_handler(CharacterNotFoundError)
    async def _not_found(request: Request, exc: CharacterNotFoundError) -> JSONResponse:
        return error_response(request, status.HTTP_404_NOT_FOUND, "NOT_FOUND", str(exc))

    @app.exception_handler(CharacterConflictError)
    async def _conflict(request: Request, exc: CharacterConflictError) -> JSONResponse:
        return error_response(request, status.HTTP_409_CONFLICT, "CONFLICT", str(exc))

    @app.exception_handler(BattleRequestError)
    async def _battle(request: Request, exc: BattleRequestError) -> JSONResponse:
        return error_response(request, status.HTTP_400_BAD_REQUEST, "BATTLE_ERROR", str(exc))

    @app.exception_handler(RoundLimitExceeded)
    async def _timeout(request: Request, exc: RoundLimitExceeded) -> JSONResponse:
        return error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "BATTLE_TIMEOUT",
            str(exc),
            [{"limit": exc.limit}],
        )

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            "Internal server error",
        )


def install_request_logging(app: FastAPI) -> None:
    """Tag every request with a correlation id and log it on the way in and out."""

    @app.middleware("http")
    async def _log_request(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        started = time.perf_counter()
        logger.info(
            "request %s %s %s [%s]",
            correlation_id,
            request.method,
            request.url.path,
            request.headers.get("user-agent", "-"),
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "request %s %s %s failed after %.1f ms: %r",
                correlation_id,
                request.method,
                request.url.path,
                (time.perf_counter() - started) * 1000,
                exc,
            )
            raise

        response.headers[CORRELATION_HEADER] = correlation_id
        logger.info(
            "response %s %s %s %d in %.1f ms",
            correlation_id,
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response


def create_app(*, state_factory: Callable[[], ApiState] = build_state) -> FastAPI:
    """Instantiate the FastAPI application with routing and lifecycle hooks."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.api_state = state_factory()
        yield

    app = FastAPI(title="Arena API", version="0.1.0", lifespan=lifespan)
    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_request_logging(app)
    install_error_handlers(app)
    app.include_router(routes.router)
    return app


app = create_app()
