"""Redis client creation and management."""
import logging
from urllib.parse import urlparse
import redis
from config import ENVIRONMENT, DEBUG
from utils.sanitization import sanitize_url

logger = logging.getLogger(__name__)


def create_redis_client(url: str) -> redis.Redis:
    """Create Redis client with security validation."""
    parsed = urlparse(url)

    # Enforce password in production
    if ENVIRONMENT == "production" and not parsed.password:
        logger.error("❌ Redis password required in production")
        raise ValueError("Redis password required in production environment")

    if parsed.scheme != "rediss" and ENVIRONMENT == "production":
        logger.warning("⚠️  Redis not using SSL (rediss://) in production! Consider using rediss:// for encrypted connections.")

    # from_url handles SSL when the scheme is rediss://
    client = redis.from_url(
        url,
        decode_responses=True
    )

    # Test connection
    try:
        client.ping()
        if DEBUG:
            logger.info(f"✅ Redis connection validated successfully: {sanitize_url(url)}")
    except redis.RedisError as e:
        logger.error(f"❌ Redis connection failed ({sanitize_url(url)}): {e}")
        raise

    return client
