"""
Tests for the weather record stores.

Tests cover:
- Insert with duplicate id rejection
- Delete all and delete by date range and/or location
- Lookup by location and by date range
- Redis store key layout against a mocked client
"""
from datetime import date
from unittest.mock import MagicMock

import pytest
import redis

from models import Location, WeatherRecord
from utils.results import StoreErrorKind
from weather_store import InMemoryWeatherStore, RedisWeatherStore

WOLFSBURG = Location(name="wolfsburg", region="lower saxony", latitude=10.0, longitude=10.0)
HANOVER = Location(name="hanover", region="lower saxony", latitude=52.37, longitude=9.73)


def make_record(record_id, location=WOLFSBURG, day=11, temperature="11, 12"):
    return WeatherRecord(
        id=record_id,
        date_recorded=date(2018, 2, day),
        location=location,
        temperature=temperature,
    )


@pytest.fixture
def store():
    store = InMemoryWeatherStore()
    for record in [
        make_record(3, WOLFSBURG, day=10),
        make_record(1, WOLFSBURG, day=11),
        make_record(2, HANOVER, day=12),
        make_record(4, HANOVER, day=13),
    ]:
        assert store.insert(record).ok
    return store


class TestInMemoryWeatherStore:
    def test_insert_returns_record(self):
        store = InMemoryWeatherStore()
        result = store.insert(make_record(1))
        assert result.ok
        assert result.value == make_record(1)

    def test_duplicate_id_is_rejected_and_store_unchanged(self, store):
        before = store.find_all()
        result = store.insert(make_record(1, HANOVER, day=20, temperature="99"))

        assert not result.ok
        assert result.error == StoreErrorKind.DUPLICATE_KEY
        assert result.value is None
        assert store.find_all() == before

    def test_find_all_is_ordered_by_id(self, store):
        assert [r.id for r in store.find_all()] == [1, 2, 3, 4]

    def test_delete_all(self, store):
        store.delete_all()
        assert store.find_all() == []

    def test_find_by_location(self, store):
        result = store.find_by_location(52.37, 9.73)
        assert result.ok
        assert [r.id for r in result.value] == [2, 4]

    def test_find_by_location_not_found(self, store):
        result = store.find_by_location(1.0, 1.0)
        assert result.error == StoreErrorKind.NOT_FOUND

    def test_find_by_date_range_is_inclusive(self, store):
        records = store.find_by_date_range(date(2018, 2, 11), date(2018, 2, 12))
        assert [r.id for r in records] == [1, 2]

    def test_delete_by_range_and_location_is_conjunctive(self, store):
        deleted = store.delete_by_range_and_location(date(2018, 2, 10), date(2018, 2, 12), 10.0, 10.0)

        assert deleted == 2
        assert [r.id for r in store.find_all()] == [2, 4]

    def test_delete_by_range_only(self, store):
        deleted = store.delete_by_range_and_location(date(2018, 2, 12), date(2018, 2, 13))

        assert deleted == 2
        assert [r.id for r in store.find_all()] == [1, 3]

    def test_delete_by_location_only(self, store):
        deleted = store.delete_by_range_and_location(latitude=52.37, longitude=9.73)

        assert deleted == 2
        assert [r.id for r in store.find_all()] == [1, 3]

    def test_delete_with_no_matches(self, store):
        assert store.delete_by_range_and_location(date(2019, 1, 1), date(2019, 1, 2)) == 0
        assert len(store.find_all()) == 4


class TestRedisWeatherStore:
    @pytest.fixture
    def redis_client(self):
        return MagicMock(spec=redis.Redis)

    def test_insert_uses_hsetnx(self, redis_client):
        redis_client.hsetnx.return_value = 1
        store = RedisWeatherStore(redis_client, "test:records")
        record = make_record(7)

        result = store.insert(record)

        assert result.ok
        key, field, payload = redis_client.hsetnx.call_args.args
        assert key == "test:records"
        assert field == "7"
        assert WeatherRecord.model_validate_json(payload) == record

    def test_insert_duplicate(self, redis_client):
        redis_client.hsetnx.return_value = 0
        store = RedisWeatherStore(redis_client)

        result = store.insert(make_record(7))

        assert result.error == StoreErrorKind.DUPLICATE_KEY

    def test_find_all_reads_hash(self, redis_client):
        redis_client.hgetall.return_value = {
            "2": make_record(2, HANOVER).model_dump_json(),
            "1": make_record(1).model_dump_json(),
            "9": "not json",
        }
        store = RedisWeatherStore(redis_client, "test:records")

        records = store.find_all()

        redis_client.hgetall.assert_called_with("test:records")
        assert [r.id for r in records] == [1, 2]

    def test_delete_all_drops_hash(self, redis_client):
        store = RedisWeatherStore(redis_client, "test:records")
        store.delete_all()
        redis_client.delete.assert_called_once_with("test:records")

    def test_delete_by_location_removes_matching_fields(self, redis_client):
        redis_client.hgetall.return_value = {
            "1": make_record(1).model_dump_json(),
            "2": make_record(2, HANOVER).model_dump_json(),
        }
        redis_client.hdel.return_value = 1
        store = RedisWeatherStore(redis_client, "test:records")

        deleted = store.delete_by_range_and_location(latitude=10.0, longitude=10.0)

        assert deleted == 1
        redis_client.hdel.assert_called_once_with("test:records", "1")

    def test_delete_without_matches_skips_hdel(self, redis_client):
        redis_client.hgetall.return_value = {}
        store = RedisWeatherStore(redis_client)

        assert store.delete_by_range_and_location(date(2018, 1, 1), date(2018, 1, 2)) == 0
        redis_client.hdel.assert_not_called()

    def test_ping_failure(self, redis_client):
        redis_client.ping.side_effect = redis.ConnectionError("down")
        assert RedisWeatherStore(redis_client).ping() is False
