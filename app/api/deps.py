from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.clients.openweather import OpenWeatherClient
from app.core.config import Settings
from app.repositories.recent_locations import NullRecentLocationStore, RecentLocationStore
from app.services.weather import WeatherLookupService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_weather_client(request: Request) -> OpenWeatherClient:
    return request.app.state.weather_client


def get_recent_location_store(request: Request) -> RecentLocationStore:
    store = getattr(request.app.state, "recent_location_store", None)
    if store is None:
        return NullRecentLocationStore()
    return store


def get_weather_service(
    client: Annotated[OpenWeatherClient, Depends(get_weather_client)],
    store: Annotated[RecentLocationStore, Depends(get_recent_location_store)],
) -> WeatherLookupService:
    return WeatherLookupService(client=client, store=store)


SettingsDep = Annotated[Settings, Depends(get_settings)]
WeatherServiceDep = Annotated[WeatherLookupService, Depends(get_weather_service)]
