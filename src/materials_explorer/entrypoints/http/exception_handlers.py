"""FastAPI exception handlers for domain errors.

Translates domain errors to appropriate HTTP responses with structured error format.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from materials_explorer.domain.errors import DomainError

logger = logging.getLogger(__name__)

# Error codes to HTTP status codes; anything else is a 400
STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CATALOG_LOAD_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors with automatic HTTP status code mapping.

    Maps domain errors to appropriate HTTP status codes:
    - VALIDATION_ERROR → 422 Unprocessable Entity
    - NOT_FOUND → 404 Not Found
    - CATALOG_LOAD_ERROR → 500 Internal Server Error
    - Other → 400 Bad Request

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        JSON response with structured error format
    """
    error_dict = exc.to_dict()
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                "path": request.url.path,
                "method": request.method,
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "path": request.url.path,
                "method": request.method,
            },
        )

    response_content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }

    # Add field-level errors if present (for ValidationError and LoadError)
    if "errors" in error_dict:
        response_content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=response_content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    These are type errors, format errors, constraint violations at the HTTP layer.

    Examples:
        - lower=abc in a drag body
        - state=shiny for the metal facet
        - Missing request body

    Args:
        request: FastAPI request object
        exc: Pydantic validation error

    Returns:
        JSON response with 422 status and structured errors
    """
    errors = []

    for error in exc.errors():
        # Filter out 'body', 'query' and 'path' prefixes
        field_path = ".".join(
            str(loc) for loc in error["loc"] if loc not in ("body", "query", "path")
        )

        errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "code": error["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={
            "errors": errors,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors.

    These should be rare and indicate bugs. Always logged with full traceback.

    Args:
        request: FastAPI request object
        exc: Unexpected exception

    Returns:
        JSON response with 500 status and generic error message
    """
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    This should be called once during app initialization.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
