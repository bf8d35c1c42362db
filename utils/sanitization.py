"""Sanitization utilities for logging."""
from urllib.parse import urlparse, urlunparse
import re


def sanitize_url(url: str) -> str:
    """Mask the password in a connection URL before it is logged."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            netloc = f"{parsed.username or ''}:***@{parsed.hostname}"
            if parsed.port:
                netloc += f":{parsed.port}"
            parsed = parsed._replace(netloc=netloc)
        return urlunparse(parsed)
    except ValueError:
        return "[REDACTED_URL]"


def sanitize_for_logging(data: str, max_length: int = 100) -> str:
    """Make client-supplied text safe to put in a log line.

    Args:
        data: The input string to sanitize
        max_length: Maximum length to keep (default 100 chars)

    Returns:
        The text truncated, with control characters and bearer tokens removed
    """
    if not data or not isinstance(data, str):
        return str(data)[:max_length] if data else ""

    if len(data) > max_length:
        data = data[:max_length] + "..."

    # Control characters would let a client forge extra log lines
    data = re.sub(r'[\r\n\t\x00-\x1f\x7f-\x9f]', ' ', data)
    data = re.sub(r'Bearer\s+\S+', 'Bearer [REDACTED]', data, flags=re.IGNORECASE)

    return re.sub(r'\s+', ' ', data).strip()
