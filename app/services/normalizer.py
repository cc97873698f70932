"""Map OpenWeatherMap's current-weather body onto :class:`NormalizedWeather`.

Every nested read tolerates absence: a missing or mistyped object yields
``None`` for the fields beneath it instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from app.models.weather import Condition, Coordinates, NormalizedWeather, Temperature


def normalize(payload: Any) -> NormalizedWeather:
    data = _mapping(payload) or {}
    main = _mapping(data.get("main")) or {}
    sys = _mapping(data.get("sys")) or {}
    wind = _mapping(data.get("wind")) or {}
    clouds = _mapping(data.get("clouds")) or {}
    condition = _first_mapping(data.get("weather")) or {}

    coord = _mapping(data.get("coord"))
    coordinates = (
        Coordinates(lat=_number_or_none(coord.get("lat")), lon=_number_or_none(coord.get("lon")))
        if coord is not None
        else None
    )

    return NormalizedWeather(
        id=_int_or_none(data.get("id")),
        name=_str_or_none(data.get("name")),
        country=_str_or_none(sys.get("country")),
        coordinates=coordinates,
        condition=Condition(
            main=_str_or_none(condition.get("main")),
            description=_str_or_none(condition.get("description")),
            icon=_str_or_none(condition.get("icon")),
        ),
        temperature=Temperature(
            current=_number_or_none(main.get("temp")),
            feels_like=_number_or_none(main.get("feels_like")),
            min=_number_or_none(main.get("temp_min")),
            max=_number_or_none(main.get("temp_max")),
        ),
        humidity=_number_or_none(main.get("humidity")),
        wind_speed=_number_or_none(wind.get("speed")),
        cloud_cover_percent=_number_or_none(clouds.get("all")),
        observed_at_epoch_millis=_epoch_millis(data.get("dt")),
    )


def _mapping(v: Any) -> Mapping[str, Any] | None:
    return v if isinstance(v, Mapping) else None


def _first_mapping(v: Any) -> Mapping[str, Any] | None:
    if not isinstance(v, list) or not v:
        return None
    return _mapping(v[0])


def _number_or_none(v: Any) -> float | int | None:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    if isinstance(v, float) and not math.isfinite(v):
        return None
    return v


def _int_or_none(v: Any) -> int | None:
    n = _number_or_none(v)
    if n is None:
        return None
    return int(n)


def _str_or_none(v: Any) -> str | None:
    return v if isinstance(v, str) else None


def _epoch_millis(seconds: Any) -> int | None:
    n = _number_or_none(seconds)
    if n is None:
        return None
    return int(round(n * 1000))
