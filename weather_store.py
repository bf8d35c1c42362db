"""Weather record storage backed by Redis, with an in-process variant."""
import logging
import threading
from datetime import date
from typing import Dict, Iterable, List, Optional

import redis

from config import DEBUG
from models import WeatherRecord
from utils.results import StoreErrorKind, StoreResult

logger = logging.getLogger(__name__)


def _matches(
    record: WeatherRecord,
    start: Optional[date] = None,
    end: Optional[date] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> bool:
    """Check a record against an inclusive date range and/or exact coordinates.

    A filter whose bounds are None is not applied.
    """
    if start is not None and record.date_recorded < start:
        return False
    if end is not None and record.date_recorded > end:
        return False
    if latitude is not None and record.location.latitude != latitude:
        return False
    if longitude is not None and record.location.longitude != longitude:
        return False
    return True


def _by_id(records: Iterable[WeatherRecord]) -> List[WeatherRecord]:
    return sorted(records, key=lambda r: r.id)


class WeatherStore:
    """Query and mutation operations shared by every store backend.

    Subclasses provide ``insert``, ``delete_all``, ``ping``, ``_all_records``
    and ``_delete_ids``; filtering is done here over the full record set.
    """

    def insert(self, record: WeatherRecord) -> StoreResult[WeatherRecord]:
        raise NotImplementedError

    def delete_all(self) -> None:
        raise NotImplementedError

    def ping(self) -> bool:
        raise NotImplementedError

    def _all_records(self) -> List[WeatherRecord]:
        raise NotImplementedError

    def _delete_ids(self, ids: List[int]) -> int:
        raise NotImplementedError

    def delete_by_range_and_location(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> int:
        """Delete records in [start, end] at (latitude, longitude). Returns how many were removed."""
        ids = [r.id for r in self._all_records() if _matches(r, start, end, latitude, longitude)]
        if not ids:
            return 0
        deleted = self._delete_ids(ids)
        if DEBUG:
            logger.debug(f"🗑️  DELETED {deleted} record(s) | start={start} end={end} lat={latitude} lon={longitude}")
        return deleted

    def find_all(self) -> List[WeatherRecord]:
        return _by_id(self._all_records())

    def find_by_location(self, latitude: float, longitude: float) -> StoreResult[List[WeatherRecord]]:
        """Records at exactly (latitude, longitude); NOT_FOUND when there are none."""
        records = _by_id(
            r for r in self._all_records() if _matches(r, latitude=latitude, longitude=longitude)
        )
        if not records:
            return StoreResult.failure(StoreErrorKind.NOT_FOUND)
        return StoreResult.success(records)

    def find_by_date_range(self, start: date, end: date) -> List[WeatherRecord]:
        """Records whose date falls within [start, end], both ends inclusive."""
        return _by_id(r for r in self._all_records() if _matches(r, start=start, end=end))


class RedisWeatherStore(WeatherStore):
    """Store records as JSON documents in a single Redis hash keyed by record id."""

    def __init__(self, redis_client: redis.Redis, records_key: str = "weather:records"):
        self.redis = redis_client
        self.records_key = records_key

    def insert(self, record: WeatherRecord) -> StoreResult[WeatherRecord]:
        # HSETNX checks and writes in one step, so concurrent inserts of one id cannot both win
        created = self.redis.hsetnx(self.records_key, str(record.id), record.model_dump_json())
        if not created:
            logger.info(f"⚠️  DUPLICATE RECORD: id={record.id}")
            return StoreResult.failure(StoreErrorKind.DUPLICATE_KEY)
        if DEBUG:
            logger.debug(f"💾 STORED RECORD: id={record.id} | date={record.date_recorded} | location={record.location.name}")
        return StoreResult.success(record)

    def delete_all(self) -> None:
        self.redis.delete(self.records_key)
        logger.info("🗑️  ERASED all weather records")

    def ping(self) -> bool:
        try:
            return bool(self.redis.ping())
        except redis.RedisError as e:
            logger.error(f"❌ Redis ping failed: {e}")
            return False

    def _all_records(self) -> List[WeatherRecord]:
        raw_records = self.redis.hgetall(self.records_key) or {}
        records = []
        for record_id, payload in raw_records.items():
            payload = payload.decode('utf-8') if isinstance(payload, bytes) else payload
            try:
                records.append(WeatherRecord.model_validate_json(payload))
            except ValueError as e:
                logger.error(f"❌ Skipping unreadable record {record_id!r}: {e}")
        return records

    def _delete_ids(self, ids: List[int]) -> int:
        return int(self.redis.hdel(self.records_key, *[str(i) for i in ids]))


class InMemoryWeatherStore(WeatherStore):
    """Process-local store for development and tests."""

    def __init__(self):
        self._records: Dict[int, WeatherRecord] = {}
        self._lock = threading.Lock()

    def insert(self, record: WeatherRecord) -> StoreResult[WeatherRecord]:
        with self._lock:
            if record.id in self._records:
                logger.info(f"⚠️  DUPLICATE RECORD: id={record.id}")
                return StoreResult.failure(StoreErrorKind.DUPLICATE_KEY)
            self._records[record.id] = record
        return StoreResult.success(record)

    def delete_all(self) -> None:
        with self._lock:
            self._records.clear()
        logger.info("🗑️  ERASED all weather records")

    def ping(self) -> bool:
        return True

    def _all_records(self) -> List[WeatherRecord]:
        with self._lock:
            return list(self._records.values())

    def _delete_ids(self, ids: List[int]) -> int:
        with self._lock:
            return sum(1 for i in ids if self._records.pop(i, None) is not None)
