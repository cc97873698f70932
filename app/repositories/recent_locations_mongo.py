from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from app.core.exceptions import StoreReadFailure, StoreWriteFailure
from app.models.weather import RecentLocation
from app.repositories.recent_locations import DEFAULT_RECENT_LIMIT

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class MongoRecentLocationStore:
    """Recently viewed locations, one document per ``(name, country)``.

    Documents keep the field names of the existing ``weatherlocations``
    collection: ``name``, ``country``, ``lat``, ``lon``, ``lastViewedAt``,
    ``createdAt`` and ``updatedAt``.
    """

    def __init__(
        self,
        *,
        collection: AsyncIOMotorCollection,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._collection = collection
        self._clock = clock

    async def ensure_indexes(self) -> None:
        await self._collection.create_index(
            [("name", ASCENDING), ("country", ASCENDING)], unique=True
        )
        await self._collection.create_index([("lastViewedAt", DESCENDING)])

    async def upsert(
        self,
        *,
        name: str,
        country: str,
        latitude: float | None,
        longitude: float | None,
    ) -> None:
        now = self._clock()
        try:
            await self._collection.update_one(
                {"name": name, "country": country},
                {
                    "$set": {
                        "lat": latitude,
                        "lon": longitude,
                        "lastViewedAt": now,
                        "updatedAt": now,
                    },
                    "$setOnInsert": {
                        "name": name,
                        "country": country,
                        "createdAt": now,
                    },
                },
                upsert=True,
            )
        except PyMongoError as e:
            raise StoreWriteFailure(f"Failed to upsert location {name}, {country}: {e}") from e

    async def list_recent(self, *, limit: int = DEFAULT_RECENT_LIMIT) -> list[RecentLocation]:
        limit = max(int(limit), 1)
        try:
            cursor = self._collection.find({}).sort("lastViewedAt", DESCENDING).limit(limit)
            docs = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error("Error fetching recent locations: %s", e)
            raise StoreReadFailure() from e
        return [_to_location(doc) for doc in docs]


def _to_location(doc: dict[str, Any]) -> RecentLocation:
    return RecentLocation(
        id=str(doc.get("_id")),
        name=str(doc.get("name") or ""),
        country=str(doc.get("country") or ""),
        latitude=doc.get("lat"),
        longitude=doc.get("lon"),
        last_viewed_at=_as_utc(doc.get("lastViewedAt")),
        created_at=_as_utc(doc.get("createdAt")),
        updated_at=_as_utc(doc.get("updatedAt")),
    )


def _as_utc(value: Any) -> datetime | None:
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
