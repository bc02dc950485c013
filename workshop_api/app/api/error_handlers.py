"""
Global exception handlers.

Every error leaves the API as ``{"error": <message>}``:

* ``WorkshopError`` subclasses use their own status and message;
* request validation failures (bad JSON, missing or invalid fields)
  become 400 with one ``<field>: <reason>`` entry per problem, unless
  the request targets an admin route and fails the admin check, which
  is then reported instead;
* Starlette HTTP errors (unknown route, method not allowed) keep their
  status;
* anything else is a 500 with a generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workshop_api.app.core.errors import StoreError, ValidationError, WorkshopError
from workshop_api.app.core.security import ADMIN_PASSWORD_HEADER, authorize_admin_request, is_admin_path

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(WorkshopError)
    async def workshop_error_handler(request: Request, exc: WorkshopError) -> JSONResponse:
        if isinstance(exc, StoreError):
            logger.error("Store error on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # The admin gate decides before body problems are reported.
        if is_admin_path(request.url.path):
            try:
                authorize_admin_request(request, request.headers.get(ADMIN_PASSWORD_HEADER))
            except WorkshopError as denied:
                return JSONResponse(status_code=denied.http_status, content=denied.to_response())
        error = ValidationError(format_validation_errors(exc.errors()))
        logger.info("Rejected %s %s: %s", request.method, request.url.path, error.message)
        return JSONResponse(status_code=error.http_status, content=error.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def format_validation_errors(errors) -> str:
    """Render pydantic error dicts as ``"email: must be ...; name: ..."``.

    The leading ``body``/``path`` location segment is dropped, as is the
    character offset pydantic reports for undecodable JSON.
    """
    parts = []
    for error in errors:
        location = [
            str(item)
            for item in error.get("loc", ())
            if item not in ("body", "path", "query", "header")
            and not (error.get("type") == "json_invalid" and isinstance(item, int))
        ]
        message = error.get("msg", "invalid value")
        parts.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
