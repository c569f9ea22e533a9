"""Domain errors and the exception handlers that render them.

Every error body has the shape ``{"detail": ..., "request_id": ...}``;
validation failures add an ``errors`` list naming the offending fields.
"""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)


class PortfolioError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class InvalidInputError(PortfolioError):
    """A write was rejected by schema validation."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid input"

    def __init__(self, detail: str | None = None, errors: list[dict[str, str]] | None = None):
        super().__init__(detail)
        self.errors = errors or []

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError | RequestValidationError, detail: str | None = None
    ) -> "InvalidInputError":
        errors = [_describe_error(err) for err in exc.errors()]
        fields = ", ".join(sorted({e["field"] for e in errors if e["field"]}))
        if detail is None:
            detail = f"Invalid input: {fields}" if fields else "Invalid input"
        return cls(detail, errors)


class InvalidIdentifierError(PortfolioError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid identifier"


class NotFoundError(PortfolioError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class UnauthorizedError(PortfolioError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid or missing admin key"


class UpstreamFailureError(PortfolioError):
    """The chat completion API was unreachable or answered with an error.

    The detail returned to the caller stays generic; the cause is logged.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "AI request failed"


class StoreUnavailableError(PortfolioError):
    """The document store could not be reached at startup."""

    detail = "Document store unavailable"


def _describe_error(err: Any) -> dict[str, str]:
    # Drop the "body" prefix FastAPI puts in front of request body fields
    loc = [str(part) for part in err.get("loc", ()) if part != "body"]
    return {"field": ".".join(loc), "message": err.get("msg", "")}


def _error_response(status_code: int, detail: Any, **extra: Any) -> JSONResponse:
    content = {"detail": detail, "request_id": correlation_id.get(), **extra}
    return JSONResponse(status_code=status_code, content=content)


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail, errors=exc.errors)

    @app.exception_handler(UpstreamFailureError)
    async def upstream_failure_handler(
        request: Request, exc: UpstreamFailureError
    ) -> JSONResponse:
        logger.error("Upstream failure", path=request.url.path, error=str(exc.__cause__ or exc))
        return _error_response(exc.status_code, UpstreamFailureError.detail)

    @app.exception_handler(PortfolioError)
    async def portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = InvalidInputError.from_validation_error(exc)
        return _error_response(error.status_code, error.detail, errors=error.errors)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
