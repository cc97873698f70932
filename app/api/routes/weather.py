from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Query

from app.api.deps import WeatherServiceDep
from app.models.weather import WeatherQuery
from app.schemas.weather import ErrorResponse, WeatherResponse
from app.services.best_effort import BestEffort

router = APIRouter()


@router.get(
    "/weather",
    response_model=WeatherResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_weather(
    service: WeatherServiceDep,
    background_tasks: BackgroundTasks,
    q: Annotated[str | None, Query(description="Free-text place name")] = None,
    lat: Annotated[str | None, Query(description="Latitude in degrees")] = None,
    lon: Annotated[str | None, Query(description="Longitude in degrees")] = None,
) -> WeatherResponse:
    service.ensure_configured()
    query = WeatherQuery.from_params(q=q, lat=lat, lon=lon)
    weather = await service.lookup(query)

    if weather.name and weather.country:
        background_tasks.add_task(
            BestEffort(
                service.record_view,
                weather,
                description=f"record recent location {weather.name}, {weather.country}",
            )
        )
    return WeatherResponse.from_weather(weather)
