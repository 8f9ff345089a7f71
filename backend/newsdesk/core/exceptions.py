"""
Domain exceptions and their translation into HTTP responses.
"""

from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from loguru import logger


class NewsdeskError(Exception):
    """Base class for errors raised by the newsdesk domain."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(NewsdeskError):
    """One or more required fields are blank."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class NotFoundError(NewsdeskError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, resource_type: str, resource_id: str):
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id


class PersistenceError(NewsdeskError):
    """Storage failure reported by the database layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UnsupportedFormatError(NewsdeskError):
    """Requested representation is not one we can render."""

    status_code = status.HTTP_406_NOT_ACCEPTABLE

    def __init__(self, requested: str):
        super().__init__(f"Unsupported format: {requested}")
        self.requested = requested


def _wants_html(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "text/html" in accept


def _render_error_page(request: Request, status_code: int, message: str) -> Response:
    # Imported lazily so the core package does not depend on the web layer at import time
    from newsdesk.api.templating import templates

    return templates.TemplateResponse(
        request,
        "errors/error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    logger.warning(f"{exc.resource_type} {exc.resource_id} not found ({request.url.path})")
    if _wants_html(request):
        return _render_error_page(request, exc.status_code, "The page you were looking for doesn't exist.")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError) -> Response:
    logger.warning(f"Rejected write on {request.url.path}: {exc.errors}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "errors": exc.errors},
    )


async def persistence_error_handler(request: Request, exc: PersistenceError) -> Response:
    logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc.message}")
    message = "We're sorry, but something went wrong."
    if _wants_html(request):
        return _render_error_page(request, exc.status_code, message)
    return JSONResponse(status_code=exc.status_code, content={"detail": message})


async def unsupported_format_handler(request: Request, exc: UnsupportedFormatError) -> Response:
    logger.info(f"Unsupported format requested on {request.url.path}: {exc.requested}")
    if _wants_html(request):
        return _render_error_page(request, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers translating domain errors into responses."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(UnsupportedFormatError, unsupported_format_handler)
