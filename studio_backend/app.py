"""
FastAPI application entry point for the relay.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studio_backend.config import get_settings
from studio_backend.routes import router

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

NOT_FOUND_MESSAGE = "Not found"


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    problems = []
    for err in exc.errors():
        # Drop the leading "body" segment; the client only knows its own keys.
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        msg = err.get("msg", "invalid value")
        problems.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "Invalid request body: " + "; ".join(problems)


async def cors_middleware(request: Request, call_next):
    # Preflight for any path, known or not, ends here.
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unrouted paths and unserved methods are both plain 404s.
    if exc.status_code == 405 or (exc.status_code == 404 and exc.detail == "Not Found"):
        return _error(404, NOT_FOUND_MESSAGE)
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = _describe_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return _error(400, message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, str(exc) or "Internal Server Error", headers=CORS_HEADERS)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Script Studio Relay", version="0.1.0", redirect_slashes=False
    )
    app.middleware("http")(cors_middleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
