from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.weather import NormalizedWeather, RecentLocation


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CoordinatesOut(_CamelModel):
    lat: int | float | None = None
    lon: int | float | None = None


class ConditionOut(_CamelModel):
    main: str | None = None
    description: str | None = None
    icon: str | None = None


class TemperatureOut(_CamelModel):
    current: int | float | None = None
    feels_like: int | float | None = None
    min: int | float | None = None
    max: int | float | None = None


class WindOut(_CamelModel):
    speed: int | float | None = None


class WeatherResponse(_CamelModel):
    id: int | None = None
    name: str | None = None
    country: str | None = None
    coordinates: CoordinatesOut | None = None
    weather: ConditionOut = Field(default_factory=ConditionOut)
    temperature: TemperatureOut = Field(default_factory=TemperatureOut)
    humidity: int | float | None = None
    wind: WindOut = Field(default_factory=WindOut)
    clouds: int | float | None = None
    timestamp: int | None = None

    @classmethod
    def from_weather(cls, weather: NormalizedWeather) -> WeatherResponse:
        coords = weather.coordinates
        return cls(
            id=weather.id,
            name=weather.name,
            country=weather.country,
            coordinates=(
                CoordinatesOut(lat=coords.lat, lon=coords.lon) if coords is not None else None
            ),
            weather=ConditionOut(
                main=weather.condition.main,
                description=weather.condition.description,
                icon=weather.condition.icon,
            ),
            temperature=TemperatureOut(
                current=weather.temperature.current,
                feels_like=weather.temperature.feels_like,
                min=weather.temperature.min,
                max=weather.temperature.max,
            ),
            humidity=weather.humidity,
            wind=WindOut(speed=weather.wind_speed),
            clouds=weather.cloud_cover_percent,
            timestamp=weather.observed_at_epoch_millis,
        )


class RecentLocationResponse(_CamelModel):
    id: str
    name: str
    country: str
    lat: float | None = None
    lon: float | None = None
    last_viewed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_location(cls, location: RecentLocation) -> RecentLocationResponse:
        return cls(
            id=location.id,
            name=location.name,
            country=location.country,
            lat=location.latitude,
            lon=location.longitude,
            last_viewed_at=location.last_viewed_at,
            created_at=location.created_at,
            updated_at=location.updated_at,
        )


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
