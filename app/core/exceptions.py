"""
Application errors.

Every error carries the HTTP status it maps to; the app factory renders
them as ``{"error": <detail>}``.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from app.core.config import CREDENTIAL_ENV_NAME

DEFAULT_PROVIDER_MESSAGE = "Failed to fetch weather data."


class AppException(HTTPException):
    """Base application exception."""

    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class MissingInput(AppException):
    """Neither a place name nor a full coordinate pair was supplied."""

    def __init__(self, detail: str = "Missing query or coordinates."):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class InvalidCoordinates(AppException):
    def __init__(self, detail: str = "Latitude and longitude must be numbers."):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class ServerMisconfigured(AppException):
    """The provider credential is not configured."""

    def __init__(self, detail: str = f"{CREDENTIAL_ENV_NAME} not configured on server."):
        super().__init__(detail=detail)


class ProviderError(AppException):
    """The provider answered with a non-2xx status or an unusable body."""

    def __init__(
        self,
        detail: str = DEFAULT_PROVIDER_MESSAGE,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        if not 400 <= status_code <= 599:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        super().__init__(detail=detail, status_code=status_code)


class TransportFailure(AppException):
    """The provider could not be reached at all."""

    def __init__(self, detail: str = DEFAULT_PROVIDER_MESSAGE):
        super().__init__(detail=detail)


class StoreReadFailure(AppException):
    def __init__(self, detail: str = "Failed to fetch recent locations."):
        super().__init__(detail=detail)


class StoreWriteFailure(AppException):
    """Raised by stores on upsert failure; absorbed by the best-effort wrapper."""

    def __init__(self, detail: str = "Failed to record recent location."):
        super().__init__(detail=detail)
