"""Root endpoint and API information."""
from fastapi import APIRouter
from version import __version__

router = APIRouter()


@router.api_route("/", methods=["GET", "OPTIONS"])
async def root():
    """Root endpoint that returns API information"""
    return {
        "name": "Weather Records API",
        "version": __version__,
        "description": "Record weather observations and query per-location temperature statistics",
        "endpoints": {
            "records": [
                "POST /weather",
                "GET /weather",
                "GET /weather?lat={lat}&lon={lon}",
                "DELETE /erase",
                "DELETE /erase?start={start}&end={end}&lat={lat}&lon={lon}"
            ],
            "statistics": [
                "GET /weather/temperature?start={start}&end={end}"
            ],
            "health": [
                "GET /health",
                "GET /health/detailed"
            ]
        },
        "date_format": "YYYY-MM-DD"
    }
