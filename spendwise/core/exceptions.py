"""Custom exception classes and the handlers that render them as envelopes."""

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()


class NotFoundError(HTTPException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Validation error", field: str | None = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )
        self.field = field


class InvalidAmountError(ValidationError):
    def __init__(self, detail: str = "Amount cannot be negative"):
        super().__init__(detail=detail, field="amount")


class InvalidCategoryError(ValidationError):
    def __init__(self, detail: str = "Invalid category"):
        super().__init__(detail=detail, field="category")


class InvalidIdentifierError(HTTPException):
    def __init__(self, resource: str = "resource"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {resource} ID",
        )


INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_body(error: str, details: list[dict] | None = None) -> dict:
    body: dict = {"success": False, "error": error}
    if details:
        body["details"] = details
    return body


def _location_to_field(loc: tuple | list) -> str:
    # ("body", "amount") -> "amount", ("query", "userId") -> "userId"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    details = None
    field = getattr(exc, "field", None)
    if field:
        details = [{"field": field, "message": exc.detail}]
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), details),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": _location_to_field(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation error", details),
    )


async def store_failure_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(
        "store_failure",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(INTERNAL_ERROR_MESSAGE),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(INTERNAL_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure with the `{success: false, error}` envelope."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_failure_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
