from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from app.core.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.mongo_uri,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )


def get_locations_collection(
    client: AsyncIOMotorClient, settings: Settings
) -> AsyncIOMotorCollection:
    return client[settings.mongo_db_name][settings.mongo_collection]
