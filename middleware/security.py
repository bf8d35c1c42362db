"""Security headers middleware."""
from fastapi import Request
from fastapi.responses import JSONResponse
from config import ENVIRONMENT

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none';",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}


async def add_security_headers(request: Request, call_next):
    """Add security headers to all responses; refuse plain HTTP in production."""
    if ENVIRONMENT == "production" and request.url.scheme != "https":
        return JSONResponse(
            status_code=400,
            content={"error": "HTTPS required in production"},
            headers={"Location": f"https://{request.url.netloc}{request.url.path}"}
        )

    response = await call_next(request)

    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value

    if request.url.scheme == "https":
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

    return response
