"""Temperature parsing and per-location statistics."""
import logging
import math
import statistics
from typing import Dict, Iterable, List, Optional, Union

from models import Location, NoData, StatsPresent, TemperatureStats, WeatherRecord

logger = logging.getLogger(__name__)


def parse_temperature_readings(raw: str) -> List[float]:
    """Parse a comma separated temperature string into numeric readings.

    Tokens that are empty, unparsable or not finite are skipped rather than
    rejecting the whole string, so "11, x, 12" yields [11.0, 12.0].
    """
    if not raw:
        return []
    values = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            logger.debug(f"Skipping unparsable temperature token: {token!r}")
            continue
        if not math.isfinite(value):
            logger.debug(f"Skipping non-finite temperature token: {token!r}")
            continue
        values.append(value)
    return values


def summarize_temperatures(values: List[float]) -> Optional[TemperatureStats]:
    """Return count, min, max and mean of the readings, or None when there are none."""
    if not values:
        return None
    return TemperatureStats(
        count=len(values),
        min=min(values),
        max=max(values),
        average=statistics.mean(values),
    )


def compute_stats(records: Iterable[WeatherRecord]) -> List[Union[StatsPresent, NoData]]:
    """
    Group records by location and summarize the temperature readings of each group.

    Locations come out in the order they first appear in ``records``. A location
    whose records contain no usable readings still gets a result, the NoData marker.
    """
    readings_by_location: Dict[Location, List[float]] = {}
    for record in records:
        readings = readings_by_location.setdefault(record.location, [])
        readings.extend(parse_temperature_readings(record.temperature))

    results: List[Union[StatsPresent, NoData]] = []
    for location, readings in readings_by_location.items():
        stats = summarize_temperatures(readings)
        if stats is None:
            results.append(NoData(location=location))
        else:
            results.append(StatsPresent(location=location, stats=stats))

    logger.debug(f"Computed temperature stats for {len(results)} location(s)")
    return results
