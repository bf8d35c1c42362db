"""Request size and content type validation middleware."""
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from config import MAX_REQUEST_BYTES
from utils.ip_utils import get_client_ip

logger = logging.getLogger(__name__)

JSON_BODY_PATHS = ("/weather",)


async def request_size_middleware(request: Request, call_next):
    """Reject oversized bodies and non-JSON bodies on record creation."""
    if request.method not in ("POST", "PUT", "PATCH"):
        return await call_next(request)

    client_ip = get_client_ip(request)
    content_type = request.headers.get("content-type", "")
    content_length = request.headers.get("content-length")

    if request.url.path in JSON_BODY_PATHS and not content_type.startswith("application/json"):
        logger.warning(f"⚠️  INVALID CONTENT-TYPE: {content_type} | IP={client_ip} | Path={request.url.path}")
        return JSONResponse(
            status_code=415,
            content={
                "error": "Unsupported Media Type",
                "message": "Content-Type must be application/json for this endpoint",
                "path": request.url.path
            }
        )

    if content_length is not None:
        try:
            size = int(content_length)
        except ValueError:
            logger.warning(f"⚠️  INVALID CONTENT-LENGTH: {content_length} | IP={client_ip} | Path={request.url.path}")
        else:
            if size > MAX_REQUEST_BYTES:
                logger.warning(f"⚠️  REQUEST TOO LARGE: {size} bytes | IP={client_ip} | Path={request.url.path}")
                return JSONResponse(
                    status_code=413,
                    content={
                        "error": "Payload Too Large",
                        "message": f"Request body too large. Maximum size is {MAX_REQUEST_BYTES} bytes",
                        "path": request.url.path
                    }
                )

    return await call_next(request)
