from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.config import OPENWEATHER_CURRENT_URL
from app.core.exceptions import (
    DEFAULT_PROVIDER_MESSAGE,
    MissingInput,
    ProviderError,
    ServerMisconfigured,
    TransportFailure,
)
from app.models.weather import WeatherQuery

logger = logging.getLogger(__name__)

UNITS = "metric"


def build_request(
    query: WeatherQuery, credential: str, *, base_url: str = OPENWEATHER_CURRENT_URL
) -> httpx.URL:
    params: dict[str, str | float] = {}
    if query.has_coordinates:
        params["lat"] = query.latitude
        params["lon"] = query.longitude
    elif query.place_name:
        params["q"] = query.place_name
    else:
        raise MissingInput()
    params["units"] = UNITS
    params["appid"] = credential
    return httpx.URL(base_url, params=params)


class OpenWeatherClient:
    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = OPENWEATHER_CURRENT_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    async def aclose(self) -> None:
        await self._client.aclose()

    def build_request(self, query: WeatherQuery) -> httpx.URL:
        if not self.has_credential:
            raise ServerMisconfigured()
        return build_request(query, self._api_key, base_url=self._base_url)

    async def fetch_current(self, query: WeatherQuery) -> dict[str, Any]:
        url = self.build_request(query)
        try:
            resp = await self._client.get(url)
        except httpx.RequestError as e:
            logger.error("Weather provider unreachable: %s", e)
            raise TransportFailure() from e

        payload = _json_or_none(resp)
        if not resp.is_success:
            message = _provider_message(payload) or DEFAULT_PROVIDER_MESSAGE
            logger.warning("Weather provider returned %s: %s", resp.status_code, message)
            raise ProviderError(message, status_code=resp.status_code)
        if not isinstance(payload, dict):
            logger.warning("Weather provider returned an unexpected body shape")
            raise ProviderError()
        return payload


def _json_or_none(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


def _provider_message(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if isinstance(message, str) and message.strip():
        return message
    return None
