"""
Google Maps Places API (legacy) HTTP client.

Wraps two endpoints:
- GET /maps/api/place/findplacefromtext/json
- GET /maps/api/place/textsearch/json

The client comes in two states. `GMapsClient` holds a key that has not
been checked yet and can only validate it. `validate_api_key()` consumes
that instance and returns a `ValidatedGMapsClient`, the only type that
exposes the query methods.

Query text is sent as a percent-encoded query parameter, and transport or
decoding failures raise `RequestFailure` instead of aborting.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Any

import httpx
from loguru import logger

from gmaps_places.config import load_settings
from gmaps_places.errors import (
    ClientConsumed,
    InvalidApiKey,
    MissingApiKey,
    RequestFailure,
)
from gmaps_places.infrastructure.trace_decorator import traced

BASE_URL = "https://maps.googleapis.com"
DEFAULT_TIMEOUT_SECONDS = 10.0

FIND_PLACE_PATH = "/maps/api/place/findplacefromtext/json"
TEXT_SEARCH_PATH = "/maps/api/place/textsearch/json"

FIND_PLACE_FIELDS = ",".join([
    "name",
    "place_id",
    "geometry",
    "formatted_address",
])
LOCATION_BIAS = "point:50,10"
TEXT_SEARCH_RADIUS_METERS = 5000

# Any place will do; only the status of the answer matters.
VALIDATION_PROBE_QUERY = "bosfor alba"
DENIED_STATUS = "REQUEST_DENIED"

# Decoded JSON body; a JSON object by convention, returned unexamined.
PlaceQueryResponse = Any


def _find_place_params(text: str) -> dict[str, Any]:
    return {
        "input": text,
        "inputtype": "textquery",
        "fields": FIND_PLACE_FIELDS,
        "locationbias": LOCATION_BIAS,
    }


class _PlacesSession:
    """Key, base address and HTTP session shared by both client states."""

    def __init__(self, api_key: str, base_url: str, http: httpx.AsyncClient) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._http: httpx.AsyncClient | None = http

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_json(self, path: str, params: dict[str, Any]) -> PlaceQueryResponse:
        if self._http is None:
            raise RequestFailure("Client is closed", path=path)
        return await self._fetch_json(self._http, path, params)

    async def _fetch_json(
        self, http: httpx.AsyncClient, path: str, params: dict[str, Any]
    ) -> PlaceQueryResponse:
        try:
            response = await http.get(path, params={**params, "key": self._api_key})
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            # str(e) embeds the request URL, key included
            status_code = e.response.status_code
            logger.error(f"Google Places API error: {status_code} on {path}")
            raise RequestFailure(
                f"Google Places API returned HTTP {status_code}",
                path=path,
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Request to {path} failed: {type(e).__name__}")
            raise RequestFailure(path=path) from e
        except ValueError as e:
            logger.error(f"Response from {path} is not valid JSON")
            raise RequestFailure("Response body is not valid JSON", path=path) from e

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        http, self._http = self._http, None
        if http is not None:
            await http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


class GMapsClient(_PlacesSession):
    """Places client whose API key has not been validated yet.

    Only `validate_api_key()` is available; the query methods live on
    `ValidatedGMapsClient`.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise MissingApiKey()
        base_url = base_url.rstrip("/")
        super().__init__(
            api_key,
            base_url,
            httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport),
        )

    @classmethod
    def from_env(
        cls,
        env_file: str | Path | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> GMapsClient:
        """Build a client from GMAPS_* environment variables or an env file.

        Raises:
            MissingApiKey: No key is configured.
            ApiKeyLoadingFailure: The configuration source could not be read.
        """
        settings = load_settings(env_file)
        return cls(
            settings.GMAPS_API_KEY,
            base_url=settings.GMAPS_BASE_URL,
            timeout=settings.GMAPS_REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    @traced(span_name="places.validate_api_key")
    async def validate_api_key(self) -> ValidatedGMapsClient:
        """Check the key against the Places API and unlock the query methods.

        This instance is consumed whatever the outcome. On success its HTTP
        session moves to the returned client; on failure it is closed.

        Raises:
            InvalidApiKey: The service answered with REQUEST_DENIED.
            RequestFailure: The probe request failed or returned invalid JSON.
            ClientConsumed: This instance was already validated.
        """
        # claimed before the first await so concurrent calls cannot share it
        http, self._http = self._http, None
        if http is None:
            raise ClientConsumed()

        logger.debug(f"Validating API key with probe query {VALIDATION_PROBE_QUERY!r}")
        try:
            payload = await self._fetch_json(
                http, FIND_PLACE_PATH, _find_place_params(VALIDATION_PROBE_QUERY)
            )
        except BaseException:
            await http.aclose()
            raise

        status = payload.get("status") if isinstance(payload, dict) else None
        if status == DENIED_STATUS:
            logger.warning(
                f"Google Places API rejected the key: {payload.get('error_message', status)}"
            )
            await http.aclose()
            raise InvalidApiKey()

        logger.info(f"API key validated (probe status: {status})")
        return ValidatedGMapsClient(self._api_key, self._base_url, http)


class ValidatedGMapsClient(_PlacesSession):
    """Places client holding a key the service has accepted.

    Obtain one from `GMapsClient.validate_api_key()`. Safe to share between
    concurrent tasks.
    """

    @traced(span_name="places.find_single_place_from_text")
    async def find_single_place_from_text(self, place: str) -> PlaceQueryResponse:
        """Find Place: look up a single place described in natural language.

        Args:
            place: Description of the desired place (e.g. "pizza party alba iulia").
        """
        logger.debug(f"Find place: input={place!r}")
        return await self._get_json(FIND_PLACE_PATH, _find_place_params(place))

    @traced(span_name="places.find_places_from_text")
    async def find_places_from_text(self, query: str) -> PlaceQueryResponse:
        """Text Search: list places matching a natural language query.

        Args:
            query: What to search for (e.g. "best pizza in Alba Iulia").
        """
        logger.debug(f"Text search: query={query!r}, radius={TEXT_SEARCH_RADIUS_METERS}")
        return await self._get_json(
            TEXT_SEARCH_PATH,
            {"query": query, "radius": TEXT_SEARCH_RADIUS_METERS},
        )
