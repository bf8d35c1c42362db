# Standard library imports
import logging
import os
from contextlib import asynccontextmanager

# Third-party imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables before importing routers
load_dotenv()

from config import (
    CORS_ORIGINS, DEBUG, REDIS_URL, WEATHER_RECORDS_KEY, WEATHER_STORE_BACKEND,
    configure_logging
)
from exceptions import register_exception_handlers
from middleware import (
    add_security_headers, log_requests_middleware, request_id_middleware,
    request_size_middleware
)
from routers.dependencies import initialize_dependencies
from routers.health import router as health_router
from routers.root import router as root_router
from routers.weather import router as weather_router
from utils.redis_client import create_redis_client
from version import __version__
from weather_store import InMemoryWeatherStore, RedisWeatherStore, WeatherStore

configure_logging()
logger = logging.getLogger(__name__)


def create_weather_store(backend: str = WEATHER_STORE_BACKEND) -> WeatherStore:
    """Build the record store selected by WEATHER_STORE_BACKEND."""
    if backend == "memory":
        logger.warning("⚠️  Using in-memory weather store; records are lost on restart")
        return InMemoryWeatherStore()
    return RedisWeatherStore(create_redis_client(REDIS_URL), WEATHER_RECORDS_KEY)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Startup
    weather_store = create_weather_store()
    initialize_dependencies(weather_store=weather_store)
    logger.info(f"✅ WEATHER STORE: {type(weather_store).__name__} ready (v{__version__})")

    yield  # Application runs here

    # Shutdown
    if DEBUG:
        logger.info("🛑 APPLICATION SHUTDOWN: Cleaning up resources")
    if isinstance(weather_store, RedisWeatherStore):
        weather_store.redis.close()


app = FastAPI(title="Weather Records API", version=__version__, lifespan=lifespan)

register_exception_handlers(app)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(weather_router)

# Middleware added last runs first
app.middleware("http")(request_size_middleware)
app.middleware("http")(add_security_headers)
app.middleware("http")(log_requests_middleware)
app.middleware("http")(request_id_middleware)

if CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["content-type", "accept", "x-request-id"],
    )


# For local testing
if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("main:app", host="0.0.0.0", port=port)
