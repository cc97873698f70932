from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.api.router import API_PREFIX, api_router
from app.clients.openweather import OpenWeatherClient
from app.core.config import Settings, load_settings
from app.core.exceptions import AppException
from app.core.logging import configure_logging
from app.db.mongo import create_mongo_client, get_locations_collection
from app.repositories.recent_locations import NullRecentLocationStore
from app.repositories.recent_locations_mongo import MongoRecentLocationStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        app.state.weather_client = OpenWeatherClient(
            api_key=settings.openweather_api_key,
            base_url=str(settings.openweather_base_url),
        )
        if not settings.openweather_api_key:
            logger.warning("OPENWEATHER_API_KEY not set. /weather will answer 500.")

        mongo_client = None
        if settings.persistence_enabled:
            mongo_client = create_mongo_client(settings)
            store = MongoRecentLocationStore(
                collection=get_locations_collection(mongo_client, settings)
            )
            try:
                await store.ensure_indexes()
                logger.info("Connected to MongoDB: %s", settings.mongo_db_name)
            except PyMongoError as e:
                logger.error("MongoDB connection error: %s", e)
            app.state.recent_location_store = store
        else:
            logger.warning("MONGO_URI not set. Recent locations are disabled.")
            app.state.recent_location_store = NullRecentLocationStore()

        yield
        await app.state.weather_client.aclose()
        if mongo_client is not None:
            mongo_client.close()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="Weather Lookup API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.get("/", tags=["meta"])
    def root():
        return {"name": "weather-lookup", "status": "ok"}

    app.include_router(api_router, prefix=API_PREFIX)
    # Unprefixed paths for clients that talk to the service directly.
    app.include_router(api_router, include_in_schema=False)
    return app
