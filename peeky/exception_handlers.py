"""Exception handlers mapping service errors to command responses.

Every failure reaches the shell as ``{"detail": "<message>"}``. Not-found
errors get a 404, malformed arguments a 422, and store errors carry the
driver's message unchanged.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from peeky.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def store_error_message(exc: SQLAlchemyError) -> str:
    """Return the underlying driver's error text when there is one."""
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    return str(exc)


def validation_error_message(exc: RequestValidationError) -> str:
    """Flatten validation errors into one "field: problem" line per error."""
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": validation_error_message(exc)},
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log a store failure and hand its message back to the caller."""
    message = store_error_message(exc)
    logger.error(
        f"Store error in {request.method} {request.url.path}: {message}",
        exc_info=True,
        extra={"error_type": type(exc).__name__, "path": request.url.path},
    )
    status_code = (
        status.HTTP_400_BAD_REQUEST
        if isinstance(exc, IntegrityError)
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=status_code, content={"detail": message})


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    logger.debug("Exception handlers registered")
