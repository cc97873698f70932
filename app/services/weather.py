from __future__ import annotations

from app.clients.openweather import OpenWeatherClient
from app.core.exceptions import ServerMisconfigured
from app.models.weather import NormalizedWeather, RecentLocation, WeatherQuery
from app.repositories.recent_locations import DEFAULT_RECENT_LIMIT, RecentLocationStore
from app.services.normalizer import normalize


class WeatherLookupService:
    def __init__(self, *, client: OpenWeatherClient, store: RecentLocationStore) -> None:
        self._client = client
        self._store = store

    def ensure_configured(self) -> None:
        if not self._client.has_credential:
            raise ServerMisconfigured()

    async def lookup(self, query: WeatherQuery) -> NormalizedWeather:
        self.ensure_configured()
        payload = await self._client.fetch_current(query)
        return normalize(payload)

    async def record_view(self, weather: NormalizedWeather) -> bool:
        """Upsert the looked-up place; returns False when it lacks name or country.

        The store stamps ``lastViewedAt`` with its own clock.
        """
        if not weather.name or not weather.country:
            return False
        coords = weather.coordinates
        await self._store.upsert(
            name=weather.name,
            country=weather.country,
            latitude=coords.lat if coords is not None else None,
            longitude=coords.lon if coords is not None else None,
        )
        return True

    async def recent(self, *, limit: int = DEFAULT_RECENT_LIMIT) -> list[RecentLocation]:
        return await self._store.list_recent(limit=limit)
