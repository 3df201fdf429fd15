"""
Global Exception Handlers

Centralized exception handling for consistent error responses.

API Error Response Format:
{
    "error": {
        "status_code": 404,
        "message": "Post with id 'some-slug' not found",
        "type": "Not Found",
        "details": {"resource_type": "Post", "resource_id": "some-slug"},
        "path": "/alliance-approved-magician/some-slug"
    }
}

Errors raised under /admin are rendered as a blocking HTML page instead,
since those requests come from a browser form.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.exceptions import CMSException
from app.templating import templates

logger = logging.getLogger(__name__)

ADMIN_PATH_PREFIX = "/admin"


def create_error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        status_code: HTTP status code
        message: Human-readable error message
        details: Additional error details
        path: Request path that caused the error

    Returns:
        JSONResponse with standardized error format
    """
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        422: "Validation Error",
        500: "Internal Server Error",
    }
    return error_types.get(status_code, "Error")


def render_die_page(request: Request, status_code: int, message: str) -> Response:
    """Render the blocking HTML refusal page used by admin screens."""
    return templates.TemplateResponse(
        request,
        "die.html",
        {"message": message, "status_code": status_code},
        status_code=status_code,
    )


async def cms_exception_handler(request: Request, exc: CMSException) -> Response:
    """
    Handle custom CMS exceptions.

    Admin screens get the HTML refusal page; everything else gets JSON.
    """
    logger.warning(
        "CMSException on %s: %s (status=%s)",
        request.url.path,
        exc.message,
        exc.status_code,
    )

    if request.url.path.startswith(ADMIN_PATH_PREFIX):
        return render_die_page(request, exc.status_code, exc.message)

    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        details=exc.details if exc.details else None,
        path=request.url.path,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle standard HTTP exceptions."""
    logger.warning("HTTPException on %s: %s", request.url.path, exc.detail)

    return create_error_response(
        status_code=exc.status_code,
        message=str(exc.detail),
        path=request.url.path,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        errors.append({"field": field, "message": error["msg"], "type": error["type"]})

    logger.warning("Validation error on %s", request.url.path)

    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        message="Validation error",
        details={"validation_errors": errors},
        path=request.url.path,
    )


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(CMSException, cms_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    logger.info("Exception handlers registered successfully")
