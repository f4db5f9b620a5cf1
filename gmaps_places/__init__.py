"""Async client for the Google Maps Places API."""

from gmaps_places.clients.google_places import (
    GMapsClient,
    PlaceQueryResponse,
    ValidatedGMapsClient,
)
from gmaps_places.config import Settings, load_api_key, load_settings
from gmaps_places.errors import (
    ApiKeyLoadingFailure,
    ClientConsumed,
    GMapsClientError,
    InvalidApiKey,
    MissingApiKey,
    RequestFailure,
)

__all__ = [
    "ApiKeyLoadingFailure",
    "ClientConsumed",
    "GMapsClient",
    "GMapsClientError",
    "InvalidApiKey",
    "MissingApiKey",
    "PlaceQueryResponse",
    "RequestFailure",
    "Settings",
    "ValidatedGMapsClient",
    "load_api_key",
    "load_settings",
]
