from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

from app.core.exceptions import InvalidCoordinates, MissingInput


@dataclass(frozen=True)
class WeatherQuery:
    place_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_params(
        cls, q: str | None = None, lat: str | None = None, lon: str | None = None
    ) -> WeatherQuery:
        """Build a query from raw query-string values.

        A full coordinate pair wins over a place name when both are given.
        """
        place = (q or "").strip()
        lat_raw = (lat or "").strip()
        lon_raw = (lon or "").strip()

        if lat_raw and lon_raw:
            return cls(latitude=_parse_coordinate(lat_raw), longitude=_parse_coordinate(lon_raw))
        if place:
            return cls(place_name=place)
        raise MissingInput()


def _parse_coordinate(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as e:
        raise InvalidCoordinates() from e
    if not math.isfinite(parsed):
        raise InvalidCoordinates()
    return parsed


@dataclass(frozen=True)
class Coordinates:
    lat: float | None = None
    lon: float | None = None


@dataclass(frozen=True)
class Condition:
    main: str | None = None
    description: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class Temperature:
    current: float | None = None
    feels_like: float | None = None
    min: float | None = None
    max: float | None = None


@dataclass(frozen=True)
class NormalizedWeather:
    id: int | None = None
    name: str | None = None
    country: str | None = None
    coordinates: Coordinates | None = None
    condition: Condition = field(default_factory=Condition)
    temperature: Temperature = field(default_factory=Temperature)
    humidity: float | None = None
    wind_speed: float | None = None
    cloud_cover_percent: float | None = None
    observed_at_epoch_millis: int | None = None


@dataclass(frozen=True)
class RecentLocation:
    id: str
    name: str
    country: str
    latitude: float | None
    longitude: float | None
    last_viewed_at: datetime | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
