"""Exception handlers for standardized error responses."""
import logging
from typing import Dict, List
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException
from models import ErrorResponse
from config import DEBUG
from utils.ip_utils import get_client_ip

logger = logging.getLogger(__name__)

# Error code mappings
ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "PAYLOAD_TOO_LARGE",
    415: "UNSUPPORTED_MEDIA_TYPE",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_SERVER_ERROR",
    503: "SERVICE_UNAVAILABLE",
}


def _validation_details(errors) -> List[Dict]:
    """Flatten pydantic error entries into field/message pairs."""
    details = []
    for error in errors:
        details.append({
            "field": " -> ".join(str(loc) for loc in error['loc']),
            "message": error['msg'],
            "type": error['type'],
            "input": str(error.get('input', 'N/A'))
        })
    return details


def _error_json(request: Request, status_code: int, code: str, message: str, details=None) -> JSONResponse:
    error_response = ErrorResponse(
        error=code,
        message=message,
        code=code,
        details=details,
        path=request.url.path,
        method=request.method,
        request_id=getattr(request.state, 'request_id', None)
    )
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Reject request bodies and parameters that do not match the declared models."""
        logger.warning(f"❌ VALIDATION ERROR: {exc.errors()} | IP={get_client_ip(request)} | Path={request.url.path}")
        return _error_json(
            request, 422, "VALIDATION_ERROR", "Request data validation failed",
            _validation_details(exc.errors())
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_exception_handler(request: Request, exc: ValidationError):
        """Handle model validation failures raised inside handlers."""
        logger.error(f"❌ PYDANTIC VALIDATION ERROR: {exc.errors()} | IP={get_client_ip(request)} | Path={request.url.path}")
        return _error_json(
            request, 422, "MODEL_VALIDATION_ERROR", "Data model validation failed",
            _validation_details(exc.errors())
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        code = ERROR_CODES.get(exc.status_code, "UNKNOWN_ERROR")
        message = exc.detail if isinstance(exc.detail, str) else (str(exc.detail) if exc.detail else "An error occurred")
        return _error_json(request, exc.status_code, code, message)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Log unhandled exceptions and answer with a generic 500."""
        request_id = getattr(request.state, 'request_id', None)
        logger.error(f"❌ UNHANDLED EXCEPTION: {type(exc).__name__}: {str(exc)} | Path={request.url.path} | Request-ID={request_id}", exc_info=True)

        # Internal details only leave the server in DEBUG mode
        return _error_json(
            request, 500, "INTERNAL_SERVER_ERROR",
            "An internal server error occurred" if not DEBUG else str(exc),
            {"type": type(exc).__name__} if DEBUG else None
        )
