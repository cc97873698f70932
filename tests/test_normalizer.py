from __future__ import annotations

import copy

import pytest

from app.models.weather import Condition, Coordinates, Temperature
from app.services.normalizer import normalize
from tests.fakes import LONDON_PAYLOAD


def test_normalize_full_payload() -> None:
    weather = normalize(LONDON_PAYLOAD)
    assert weather.id == 2643743
    assert weather.name == "London"
    assert weather.country == "GB"
    assert weather.coordinates == Coordinates(lat=51.5085, lon=-0.1257)
    assert weather.condition == Condition(
        main="Clouds", description="overcast clouds", icon="04d"
    )
    assert weather.temperature == Temperature(current=15.2, feels_like=14.8, min=13.0, max=17.0)
    assert weather.humidity == 72
    assert weather.wind_speed == 3.6
    assert weather.cloud_cover_percent == 90
    assert weather.observed_at_epoch_millis == 1700000000000


@pytest.mark.parametrize("missing", ["wind", "clouds", "weather", "main", "sys", "coord", "dt"])
def test_normalize_tolerates_missing_sections(missing: str) -> None:
    payload = copy.deepcopy(LONDON_PAYLOAD)
    payload.pop(missing)
    weather = normalize(payload)
    assert weather.name == "London"

    if missing == "wind":
        assert weather.wind_speed is None
    if missing == "clouds":
        assert weather.cloud_cover_percent is None
    if missing == "weather":
        assert weather.condition == Condition()
    if missing == "main":
        assert weather.temperature == Temperature()
        assert weather.humidity is None
    if missing == "sys":
        assert weather.country is None
    if missing == "coord":
        assert weather.coordinates is None
    if missing == "dt":
        assert weather.observed_at_epoch_millis is None


@pytest.mark.parametrize(
    "payload",
    [
        {},
        None,
        [],
        "not json",
        {"weather": []},
        {"weather": "rain", "main": [1, 2], "wind": None, "sys": "GB"},
        {"weather": [None]},
        {"dt": "yesterday", "id": True},
    ],
)
def test_normalize_is_total_on_odd_shapes(payload: object) -> None:
    weather = normalize(payload)
    assert weather.id is None
    assert weather.condition.main is None
    assert weather.temperature.current is None
    assert weather.wind_speed is None
    assert weather.observed_at_epoch_millis is None


def test_timestamp_seconds_become_milliseconds() -> None:
    assert normalize({"dt": 1700000000}).observed_at_epoch_millis == 1700000000000
    assert normalize({"dt": 1.5}).observed_at_epoch_millis == 1500


def test_non_string_text_fields_are_dropped() -> None:
    weather = normalize(
        {"name": 123, "sys": {"country": ["GB"]}, "weather": [{"main": 7, "icon": "04d"}]}
    )
    assert weather.name is None
    assert weather.country is None
    assert weather.condition == Condition(main=None, description=None, icon="04d")
