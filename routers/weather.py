"""Weather record endpoints."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import JSONResponse
from config import DEBUG
from models import WeatherRecord, WeatherStatsResult
from routers.dependencies import get_weather_store
from utils.dates import parse_query_date
from utils.results import StoreErrorKind
from utils.temperature import compute_stats
from weather_store import WeatherStore

logger = logging.getLogger(__name__)
router = APIRouter()


def _require_pair(first_name: str, first, second_name: str, second) -> bool:
    """Return True when both values are given, False when neither is, 400 otherwise."""
    if (first is None) != (second is None):
        raise HTTPException(400, f"'{first_name}' and '{second_name}' must be supplied together")
    return first is not None


@router.post("/weather", status_code=201, response_model=WeatherRecord)
def create_weather_record(
    record: WeatherRecord,
    store: WeatherStore = Depends(get_weather_store)
):
    """Create a weather record. A record id that already exists gets a 400 with no body."""
    result = store.insert(record)
    if result.error == StoreErrorKind.DUPLICATE_KEY:
        return Response(status_code=400)
    if DEBUG:
        logger.debug(f"✅ CREATED RECORD: id={record.id} | date={record.date_recorded}")
    return JSONResponse(status_code=201, content=result.value.model_dump(mode="json"))


@router.delete("/erase")
def erase_weather_records(
    start: Optional[str] = Query(None, description="Start date, YYYY-MM-DD"),
    end: Optional[str] = Query(None, description="End date, YYYY-MM-DD"),
    lat: Optional[float] = Query(None, description="Latitude"),
    lon: Optional[float] = Query(None, description="Longitude"),
    store: WeatherStore = Depends(get_weather_store)
):
    """Erase all records, or those in a date range and/or at a location."""
    has_range = _require_pair("start", start, "end", end)
    has_location = _require_pair("lat", lat, "lon", lon)

    if not has_range and not has_location:
        store.delete_all()
        return Response(status_code=200)

    start_date = parse_query_date(start, "start")
    end_date = parse_query_date(end, "end")
    if has_range and start_date > end_date:
        raise HTTPException(400, "'start' must not be after 'end'")

    deleted = store.delete_by_range_and_location(start_date, end_date, lat, lon)
    logger.info(f"🗑️  ERASE: removed {deleted} record(s) | start={start} end={end} lat={lat} lon={lon}")
    return Response(status_code=200)


@router.get("/weather", response_model=List[WeatherRecord])
def get_weather_records(
    lat: Optional[float] = Query(None, description="Latitude"),
    lon: Optional[float] = Query(None, description="Longitude"),
    store: WeatherStore = Depends(get_weather_store)
):
    """List every record, or the records at one location (404 with no body when there are none)."""
    if not _require_pair("lat", lat, "lon", lon):
        return store.find_all()

    result = store.find_by_location(lat, lon)
    if result.error == StoreErrorKind.NOT_FOUND:
        return Response(status_code=404)
    return result.value


@router.get("/weather/temperature", response_model=List[WeatherStatsResult])
def get_temperature_stats(
    start: str = Query(..., description="Start date, YYYY-MM-DD"),
    end: str = Query(..., description="End date, YYYY-MM-DD"),
    store: WeatherStore = Depends(get_weather_store)
):
    """Per-location temperature statistics for records dated within [start, end]."""
    start_date = parse_query_date(start, "start")
    end_date = parse_query_date(end, "end")
    if start_date > end_date:
        raise HTTPException(400, "'start' must not be after 'end'")

    records = store.find_by_date_range(start_date, end_date)
    return compute_stats(records)
