"""Tests for grouping forecast items by calendar date."""

from datetime import UTC, datetime, timedelta

from weatherapi.config.schema import DisplayConfig
from weatherapi.formatting.formatters import format_forecast_item
from weatherapi.formatting.grouping import group_by_date
from weatherapi.models.openweather import RawForecastItem


def _item(dt_txt: str, temp: float = 10.0) -> RawForecastItem:
    return RawForecastItem.model_validate(
        {
            "dt_txt": dt_txt,
            "main": {
                "temp": temp,
                "feels_like": temp,
                "temp_min": temp,
                "temp_max": temp,
                "humidity": 50,
            },
            "weather": [{"main": "Clear", "description": "맑음", "icon": "01d"}],
            "wind": {"speed": 1.0},
        }
    )


class TestGroupByDate:
    def test_two_dates(self, forecast_payload):
        grouped = group_by_date(forecast_payload.items)
        assert list(grouped) == ["2024-05-01", "2024-05-02"]
        assert len(grouped["2024-05-01"]) == 2
        assert len(grouped["2024-05-02"]) == 1
        assert [e.forecast_time for e in grouped["2024-05-01"]] == [
            "2024-05-01 09:00:00",
            "2024-05-01 12:00:00",
        ]

    def test_empty_list(self):
        assert group_by_date([]) == {}

    def test_late_utc_item_rolls_into_next_local_day(self):
        items = [_item("2024-05-01 12:00:00"), _item("2024-05-01 18:00:00")]
        grouped = group_by_date(items)
        assert list(grouped) == ["2024-05-01", "2024-05-02"]

    def test_utc_display_groups_by_provider_date(self):
        items = [_item("2024-05-01 12:00:00"), _item("2024-05-01 18:00:00")]
        grouped = group_by_date(items, DisplayConfig(utc_offset_hours=0))
        assert list(grouped) == ["2024-05-01"]
        assert len(grouped["2024-05-01"]) == 2

    def test_five_days_preserve_content_and_order(self):
        start = datetime(2024, 5, 1, 0, 0, tzinfo=UTC)
        items = [
            _item((start + timedelta(hours=3 * i)).strftime("%Y-%m-%d %H:%M:%S"), temp=i)
            for i in range(40)
        ]
        grouped = group_by_date(items)

        flattened = [entry for entries in grouped.values() for entry in entries]
        assert flattened == [format_forecast_item(item) for item in items]

        expected_days = []
        for item in items:
            day = (
                datetime.fromisoformat(item.dt_txt).replace(tzinfo=UTC)
                + timedelta(hours=9)
            ).strftime("%Y-%m-%d")
            if day not in expected_days:
                expected_days.append(day)
        assert list(grouped) == expected_days

    def test_display_offset_changes_buckets_from_provider_dates(self):
        items = [
            _item("2024-05-01 12:00:00"),
            _item("2024-05-01 18:00:00"),
            _item("2024-05-02 12:00:00"),
        ]

        local = group_by_date(items)
        assert {day: len(v) for day, v in local.items()} == {
            "2024-05-01": 1,
            "2024-05-02": 2,
        }

        provider = group_by_date(items, DisplayConfig(utc_offset_hours=0))
        assert {day: len(v) for day, v in provider.items()} == {
            "2024-05-01": 2,
            "2024-05-02": 1,
        }
