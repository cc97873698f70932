from __future__ import annotations

from typing import Protocol

from app.models.weather import RecentLocation

DEFAULT_RECENT_LIMIT = 5


class RecentLocationStore(Protocol):
    async def upsert(
        self,
        *,
        name: str,
        country: str,
        latitude: float | None,
        longitude: float | None,
    ) -> None: ...

    async def list_recent(self, *, limit: int = DEFAULT_RECENT_LIMIT) -> list[RecentLocation]: ...


class NullRecentLocationStore:
    """Store used when persistence is disabled: writes vanish, reads are empty."""

    async def upsert(
        self,
        *,
        name: str,
        country: str,
        latitude: float | None,
        longitude: float | None,
    ) -> None:
        return None

    async def list_recent(self, *, limit: int = DEFAULT_RECENT_LIMIT) -> list[RecentLocation]:
        return []
