"""Application configuration and environment variables."""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

# Environment and debug settings
ENVIRONMENT = os.getenv("ENVIRONMENT", os.getenv("ENV", "development")).lower()
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Prevent DEBUG mode in production
if ENVIRONMENT == "production" and DEBUG:
    logging.basicConfig(level=logging.INFO)
    logging.getLogger(__name__).error("❌ DEBUG mode cannot be enabled in production environment")
    raise ValueError("DEBUG=true is forbidden in production. Set ENVIRONMENT=production and DEBUG=false")

# Logging configuration
LOG_VERBOSITY = os.getenv("LOG_VERBOSITY", "normal").lower()  # "minimal", "normal", "verbose"

# Record store configuration
WEATHER_STORE_BACKEND = os.getenv("WEATHER_STORE_BACKEND", "redis").strip().lower()  # "redis" or "memory"
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379").strip()
WEATHER_RECORDS_KEY = os.getenv("WEATHER_RECORDS_KEY", "weather:records").strip()

if WEATHER_STORE_BACKEND not in ("redis", "memory"):
    raise ValueError(f"Unsupported WEATHER_STORE_BACKEND: {WEATHER_STORE_BACKEND!r} (expected 'redis' or 'memory')")

# Wire format for calendar dates (query parameters and record bodies)
DATE_FORMAT = "%Y-%m-%d"

# Request limits
MAX_REQUEST_BYTES = int(os.getenv("MAX_REQUEST_BYTES", str(1024 * 1024)))


def configure_logging():
    """Configure root logging from DEBUG and LOG_VERBOSITY if nothing else has."""
    if not logging.getLogger().handlers:
        log_level = logging.WARNING if LOG_VERBOSITY == "minimal" else (logging.DEBUG if DEBUG or LOG_VERBOSITY == "verbose" else logging.INFO)
        logging.basicConfig(level=log_level)


# CORS configuration
def validate_cors_config():
    """Validate CORS configuration to prevent misconfiguration."""
    origins = os.getenv("CORS_ORIGINS", "").strip()

    configure_logging()
    logger = logging.getLogger(__name__)

    if origins == "*":
        logger.error("❌ CORS_ORIGINS set to '*' - this is insecure!")
        if ENVIRONMENT == "production":
            raise ValueError("Wildcard CORS not allowed in production")
        else:
            logger.warning("⚠️  Wildcard CORS in non-production environment")

    return [origin.strip() for origin in origins.split(",") if origin.strip()]

CORS_ORIGINS = validate_cors_config()
