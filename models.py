"""Pydantic models for weather records, temperature statistics and API errors."""
import re
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, List, Optional, Dict, Union, Literal
from config import DATE_FORMAT

NO_DATA_FOR_GIVEN_DATE_RANGE = "There is no weather data in the given date range"

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class Location(BaseModel):
    """Where an observation was recorded. Equal iff every field is equal."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="City or station name")
    region: str = Field(..., description="State, province or region")
    latitude: float = Field(..., allow_inf_nan=False, description="Latitude in decimal degrees")
    longitude: float = Field(..., allow_inf_nan=False, description="Longitude in decimal degrees")


class WeatherRecord(BaseModel):
    """A single weather observation for one location on one day."""
    id: int = Field(..., description="Unique record identifier")
    date_recorded: date = Field(..., description="Date the observation was recorded, YYYY-MM-DD")
    location: Location = Field(..., description="Location of the observation")
    temperature: str = Field(..., description="Comma separated temperature readings, e.g. '11, 12'")

    @field_validator("date_recorded", mode="before")
    @classmethod
    def require_calendar_date(cls, value):
        """Accept only date objects or YYYY-MM-DD strings, not timestamps or datetimes."""
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not DATE_PATTERN.match(value):
            raise ValueError("date_recorded must be a date in YYYY-MM-DD format")
        return datetime.strptime(value, DATE_FORMAT).date()


class TemperatureStats(BaseModel):
    """Summary statistics over the parsed temperature readings of one location."""
    count: int = Field(..., description="Number of readings")
    min: float = Field(..., description="Lowest reading")
    max: float = Field(..., description="Highest reading")
    average: float = Field(..., description="Arithmetic mean of the readings")


class StatsPresent(BaseModel):
    """Statistics for a location that had readings in the requested range."""
    kind: Literal["stats"] = "stats"
    location: Location
    stats: TemperatureStats


class NoData(BaseModel):
    """Marker for a location whose records held no usable readings in the range."""
    kind: Literal["no_data"] = "no_data"
    location: Location
    message: str = NO_DATA_FOR_GIVEN_DATE_RANGE


WeatherStatsResult = Annotated[Union[StatsPresent, NoData], Field(discriminator="kind")]


# Error Response Model
class ErrorResponse(BaseModel):
    """Standardized error response format for consistent API error handling."""
    error: str = Field(..., description="Error type or code")
    message: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(None, description="Error code for programmatic handling")
    details: Optional[Union[List[Dict], Dict, str]] = Field(None, description="Additional error details")
    path: Optional[str] = Field(None, description="Request path where error occurred")
    method: Optional[str] = Field(None, description="HTTP method")
    request_id: Optional[str] = Field(None, description="Request ID for tracing")
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat(),
                          description="Error timestamp")
