"""Health check and status endpoints."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from datetime import datetime
from config import WEATHER_STORE_BACKEND
from routers.dependencies import get_weather_store
from version import __version__
from weather_store import WeatherStore

router = APIRouter()


@router.get("/health")
async def health_check():
    """Simple health check endpoint for load balancers."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@router.get("/health/detailed")
def detailed_health_check(store: WeatherStore = Depends(get_weather_store)):
    """Health check that also probes the record store."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "checks": {}
    }

    if store.ping():
        health_status["checks"]["store"] = {
            "status": "healthy",
            "backend": WEATHER_STORE_BACKEND,
            "message": "Store reachable"
        }
    else:
        health_status["checks"]["store"] = {
            "status": "unhealthy",
            "backend": WEATHER_STORE_BACKEND,
            "message": "Store did not answer ping"
        }
        health_status["status"] = "unhealthy"

    status_code = 200 if health_status["status"] == "healthy" else 503

    return JSONResponse(
        content=health_status,
        status_code=status_code,
        headers={"Cache-Control": "no-cache"}
    )
