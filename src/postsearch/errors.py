import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .models import ErrorResponse

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """A failure that is reported to the client as an `ErrorResponse`."""

    def __init__(self, status_code: int, error: str, details: str | None = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def _error_response(exc: SearchError) -> JSONResponse:
    body = ErrorResponse(error=exc.error, details=exc.details)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


async def search_error_handler(request: Request, exc: SearchError) -> JSONResponse:
    return _error_response(exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request bodies that fail validation as an `ErrorResponse`.

    A body that is not valid JSON is a server-side failure to read the
    request (500); any other shape problem means there is no usable
    question (400).
    """
    errors = exc.errors()
    for err in errors:
        if err.get("type") == "json_invalid":
            ctx = err.get("ctx") or {}
            details = str(ctx.get("error") or err.get("msg") or "Unknown error")
            logger.error("Invalid JSON body on %s: %s", request.url.path, details)
            return _error_response(
                SearchError(500, "Internal server error", details=details)
            )

    logger.info("Rejected request body on %s: %s", request.url.path, errors)
    return _error_response(SearchError(400, "Question is required"))
