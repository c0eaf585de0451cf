"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloglist.core.config import ServerSettings, get_server_settings
from bloglist.core.logging_safety import safe_request_path
from bloglist.errors import ApiError, ValidationError
from bloglist.repositories.memory import InMemoryStore
from bloglist.routes import blogs_router, login_router, users_router
from bloglist.schemas.error import ErrorResponse, UnknownEndpointDetail, UnknownEndpointError

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request payload"

    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}" if location else message


def create_app(server_settings: ServerSettings | None = None) -> FastAPI:
    server_settings = server_settings or get_server_settings()
    logging.getLogger("bloglist").setLevel(server_settings.log_level.upper())

    app = FastAPI(title="Bloglist API", version="1.0.0")
    app.state.store = InMemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=server_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "request.completed method=%s path=%s status=%s duration_ms=%d",
            request.method,
            safe_request_path(request.url.path),
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.payload.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_, exc: RequestValidationError) -> JSONResponse:
        error = ValidationError(_validation_message(exc))
        return JSONResponse(status_code=error.status_code, content=error.payload.model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Routing misses only; domain 404s travel as ApiError.
        if exc.status_code == 404:
            payload = UnknownEndpointError(error=UnknownEndpointDetail(message="unknown endpoint"))
            return JSONResponse(status_code=404, content=payload.model_dump())
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "request.failed method=%s path=%s error=%s",
            request.method,
            safe_request_path(request.url.path),
            type(exc).__name__,
        )
        payload = ErrorResponse(error="internal server error", code="INTERNAL_ERROR")
        return JSONResponse(status_code=500, content=payload.model_dump())

    api_prefix = "/api"
    app.include_router(login_router, prefix=api_prefix)
    app.include_router(users_router, prefix=api_prefix)
    app.include_router(blogs_router, prefix=api_prefix)

    return app


app = create_app()
