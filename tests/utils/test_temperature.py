"""
Tests for temperature parsing and per-location statistics.
"""
from datetime import date

import pytest

from models import Location, NoData, StatsPresent, WeatherRecord, NO_DATA_FOR_GIVEN_DATE_RANGE
from utils.temperature import compute_stats, parse_temperature_readings, summarize_temperatures

WOLFSBURG = Location(name="wolfsburg", region="lower saxony", latitude=10.0, longitude=10.0)
HANOVER = Location(name="hanover", region="lower saxony", latitude=52.37, longitude=9.73)


def make_record(record_id, location, temperature, day=11):
    return WeatherRecord(
        id=record_id,
        date_recorded=date(2018, 2, day),
        location=location,
        temperature=temperature,
    )


class TestParseTemperatureReadings:
    @pytest.mark.parametrize("raw,expected", [
        ("11, 12", [11.0, 12.0]),
        ("20", [20.0]),
        (" -3.5 ,4 ", [-3.5, 4.0]),
        ("11, abc, 12", [11.0, 12.0]),
        ("11,,12", [11.0, 12.0]),
        ("", []),
        ("n/a", []),
        ("nan, inf, 5", [5.0]),
    ])
    def test_parse(self, raw, expected):
        assert parse_temperature_readings(raw) == expected


class TestSummarizeTemperatures:
    def test_empty_is_none(self):
        assert summarize_temperatures([]) is None

    def test_summary(self):
        stats = summarize_temperatures([11.0, 12.0, 20.0])
        assert stats.count == 3
        assert stats.min == 11.0
        assert stats.max == 20.0
        assert stats.average == pytest.approx(43.0 / 3)


class TestComputeStats:
    def test_empty_input_gives_empty_output(self):
        assert compute_stats([]) == []

    def test_records_at_same_location_are_merged(self):
        results = compute_stats([
            make_record(1, WOLFSBURG, "11, 12"),
            make_record(2, WOLFSBURG, "20", day=12),
        ])

        assert len(results) == 1
        result = results[0]
        assert isinstance(result, StatsPresent)
        assert result.location == WOLFSBURG
        assert result.stats.count == 3
        assert result.stats.min == 11.0
        assert result.stats.max == 20.0
        assert result.stats.average == pytest.approx((11 + 12 + 20) / 3)

    def test_location_without_readings_gets_no_data(self):
        results = compute_stats([make_record(1, HANOVER, "")])

        assert len(results) == 1
        assert isinstance(results[0], NoData)
        assert results[0].location == HANOVER
        assert results[0].message == NO_DATA_FOR_GIVEN_DATE_RANGE

    def test_order_follows_first_occurrence(self):
        results = compute_stats([
            make_record(1, HANOVER, "1"),
            make_record(2, WOLFSBURG, "2"),
            make_record(3, HANOVER, "3"),
        ])

        assert [r.location for r in results] == [HANOVER, WOLFSBURG]
        assert results[0].stats.count == 2

    def test_locations_differing_in_one_field_stay_separate(self):
        renamed = Location(name="wolfsburg-west", region="lower saxony", latitude=10.0, longitude=10.0)
        results = compute_stats([
            make_record(1, WOLFSBURG, "1"),
            make_record(2, renamed, "2"),
        ])

        assert len(results) == 2

    def test_mixed_stats_and_no_data(self):
        results = compute_stats([
            make_record(1, WOLFSBURG, "bad"),
            make_record(2, HANOVER, "5, 7"),
        ])

        assert isinstance(results[0], NoData)
        assert isinstance(results[1], StatsPresent)
        assert results[1].stats.average == 6.0

    def test_min_le_average_le_max(self):
        results = compute_stats([
            make_record(1, WOLFSBURG, "3.2, -1, 8, x"),
            make_record(2, WOLFSBURG, "0.5"),
        ])

        stats = results[0].stats
        assert stats.min <= stats.average <= stats.max
        assert stats.count == 4

    def test_serialized_shape(self):
        payload = [r.model_dump() for r in compute_stats([
            make_record(1, WOLFSBURG, "11, 12"),
            make_record(2, HANOVER, ""),
        ])]

        assert payload[0]["kind"] == "stats"
        assert payload[0]["stats"] == {"count": 2, "min": 11.0, "max": 12.0, "average": 11.5}
        assert payload[1]["kind"] == "no_data"
        assert "stats" not in payload[1]

    def test_large_readings_do_not_overflow_average(self):
        results = compute_stats([make_record(1, WOLFSBURG, "1e308, 1e308")])

        stats = results[0].stats
        assert stats.count == 2
        assert stats.average == 1e308
        assert stats.min <= stats.average <= stats.max
