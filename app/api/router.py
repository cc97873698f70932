from fastapi import APIRouter

from app.api.routes import health, locations, weather

API_PREFIX = "/api"

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(weather.router, tags=["weather"])
api_router.include_router(locations.router, tags=["locations"])
