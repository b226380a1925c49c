"""Error Handlers: every failure leaves the API as a DecoderError envelope.

Invariants:
    - DecoderError subclasses answer with their own http_status and to_response()
    - Pydantic request errors become a VALIDATION_ERROR DecoderError (400) with field details
    - Anything else becomes an INTERNAL_ERROR DecoderError (500) without internals
    - Log level follows the error category; line_index/key_length go into log extras
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from vigenere_decoder.core.errors import (
    DecoderError, ErrorCategory, ErrorContext, ErrorSeverity,
)

logger = logging.getLogger(__name__)

_LOG_LEVEL_BY_CATEGORY = {
    ErrorCategory.VALIDATION: logging.INFO,
    ErrorCategory.RANGE: logging.INFO,
    ErrorCategory.STATE: logging.WARNING,
    ErrorCategory.INTERNAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DecoderError, decoder_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def decoder_error_handler(request: Request, exc: DecoderError) -> JSONResponse:
    logger.log(
        _LOG_LEVEL_BY_CATEGORY.get(exc.category, logging.ERROR),
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "line_index": exc.context.line_index,
            "key_length": exc.context.key_length,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    error = DecoderError(
        "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
        ErrorSeverity.ERROR, ErrorContext(details=details),
        status.HTTP_400_BAD_REQUEST,
    )
    return await decoder_error_handler(request, error)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    error = DecoderError(
        "An unexpected error occurred", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
        ErrorSeverity.CRITICAL, http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())
