from __future__ import annotations

from fastapi import APIRouter

from app.api.deps import SettingsDep, WeatherServiceDep
from app.schemas.weather import ErrorResponse, RecentLocationResponse

router = APIRouter(prefix="/locations")


@router.get(
    "/recent",
    response_model=list[RecentLocationResponse],
    responses={500: {"model": ErrorResponse}},
)
async def recent_locations(
    service: WeatherServiceDep, settings: SettingsDep
) -> list[RecentLocationResponse]:
    rows = await service.recent(limit=settings.recent_locations_limit)
    return [RecentLocationResponse.from_location(r) for r in rows]
