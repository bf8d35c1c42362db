"""Calendar date parsing for query parameters."""
from datetime import date, datetime
from typing import Optional

from fastapi import HTTPException

from config import DATE_FORMAT
from models import DATE_PATTERN


def parse_query_date(value: Optional[str], field: str) -> Optional[date]:
    """Parse a YYYY-MM-DD query parameter, passing None through.

    Raises:
        HTTPException: 400 when the value is not a valid date in the fixed format
    """
    if value is None:
        return None
    if not DATE_PATTERN.match(value):
        raise HTTPException(400, f"'{field}' must be in YYYY-MM-DD format")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise HTTPException(400, f"Invalid date for '{field}': {value}")
