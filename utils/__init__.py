"""Utility functions for the application."""
from .sanitization import sanitize_url, sanitize_for_logging
from .ip_utils import get_client_ip
from .dates import parse_query_date
from .results import StoreErrorKind, StoreResult
from .temperature import parse_temperature_readings, summarize_temperatures, compute_stats
from .redis_client import create_redis_client

__all__ = [
    "sanitize_url",
    "sanitize_for_logging",
    "get_client_ip",
    "parse_query_date",
    "StoreErrorKind",
    "StoreResult",
    "parse_temperature_readings",
    "summarize_temperatures",
    "compute_stats",
    "create_redis_client",
]
