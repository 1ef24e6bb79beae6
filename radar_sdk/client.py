"""User-facing client for the Radar location APIs.

Example usage:
    from radar_sdk import RadarClient, StaticGeolocation

    radar = RadarClient(geolocation=StaticGeolocation(40.7039, -73.9867, 65))
    radar.initialize("prj_live_pk_...")

    result = await radar.track_once()
    places = await radar.search_places(40.7039, -73.9867, 1000, chains=["starbucks"])
"""

import os
import sys
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from radar_sdk._internal.dispatch import (
    CompletionResult,
    OutboundRequest,
    dispatch,
    extract_response_key,
)
from radar_sdk._internal.http import (
    DEFAULT_HOST,
    DEVICE_TYPE,
    USER_AGENT,
    create_http_client,
    sdk_headers,
)
from radar_sdk._version import __version__
from radar_sdk.device import DeviceIdentity, StoredDeviceIdentity
from radar_sdk.exceptions import GeolocationError
from radar_sdk.geolocation import Geolocation
from radar_sdk.models import PlacesProvider, SearchResult, TrackResult
from radar_sdk.status import StatusCode
from radar_sdk.storage import (
    DESCRIPTION,
    HOST,
    PLACES_PROVIDER,
    PUBLISHABLE_KEY,
    USER_ID,
    ConfigStore,
    MemoryConfigStore,
)

DEFAULT_TIMEOUT_MS = 10000
MAX_LIMIT = 100
MAX_FIELD_LENGTH = 256

StatusCallback = Callable[..., None]
ResultT = TypeVar("ResultT", TrackResult, SearchResult)


class RadarClient:
    """Client for Radar tracking, search and geocoding.

    Every call reads its settings (publishable key, host, user id) from the
    ConfigStore at call time. Calls never raise for API or network
    failures: each resolves to a result carrying one StatusCode, and the
    optional `callback(status, *extra)` is invoked exactly once with it.

    Use `RadarClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        store: ConfigStore | None = None,
        *,
        geolocation: Geolocation | None = None,
        device: DeviceIdentity | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the Radar client.

        Args:
            store: Settings store. Defaults to a fresh MemoryConfigStore.
            geolocation: Position source for `track_once`.
            device: Device id supplier. Defaults to an id kept in `store`.
            http_client: Optional shared AsyncClient; owned by the caller.
            timeout_ms: Request timeout in milliseconds when no
                http_client is given.
            debug: Enable debug logging to stderr.
        """
        self._store = store if store is not None else MemoryConfigStore()
        self._geolocation = geolocation
        self._device = device if device is not None else StoredDeviceIdentity(self._store)
        self._http_client = http_client
        self._timeout_ms = timeout_ms
        self._debug = debug

    @classmethod
    def from_env(cls, **kwargs: Any) -> "RadarClient":
        """Create a Radar client from environment variables.

        Environment variables:
            RADAR_PUBLISHABLE_KEY: The publishable API key.
            RADAR_HOST: API host override (default: https://api.radar.io).
            RADAR_DEBUG: Set to "1" to enable debug logging.
            RADAR_TIMEOUT_MS: Request timeout in milliseconds.

        Args:
            **kwargs: Passed through to the constructor (store, geolocation, ...).

        Returns:
            A configured RadarClient. Without a publishable key every call
            reports ERROR_PUBLISHABLE_KEY.
        """
        publishable_key = os.environ.get("RADAR_PUBLISHABLE_KEY")
        host = os.environ.get("RADAR_HOST")

        debug = os.environ.get("RADAR_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("RADAR_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        client = cls(timeout_ms=timeout_ms, debug=debug, **kwargs)
        if publishable_key:
            client.initialize(publishable_key)
        else:
            client._log_debug("RADAR_PUBLISHABLE_KEY not set")
        if host:
            client.set_host(host)
        return client

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def version(self) -> str:
        return __version__

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[radar-sdk] {message}", file=sys.stderr)

    def _log_error(self, message: str) -> None:
        print(f"[radar-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Settings
    # =========================================================================

    def initialize(self, publishable_key: str | None) -> None:
        """Set the publishable key sent as the Authorization header."""
        if not publishable_key:
            self._log_error('"initialize" was called without a publishable key')
            self._store.delete(PUBLISHABLE_KEY)
            return
        self._store.set(PUBLISHABLE_KEY, publishable_key)

    def set_host(self, host: str | None) -> None:
        """Override the API host. Stored permanently; empty values restore the default."""
        if not host:
            self._store.delete(HOST)
            return
        self._store.set(HOST, host.rstrip("/"), permanent=True)

    def set_places_provider(self, places_provider: PlacesProvider | str | None) -> None:
        """Select the places provider; anything other than facebook means none."""
        if places_provider == PlacesProvider.FACEBOOK:
            self._store.set(PLACES_PROVIDER, PlacesProvider.FACEBOOK.value)
        else:
            self._store.set(PLACES_PROVIDER, PlacesProvider.NONE.value)

    def set_user_id(self, user_id: Any) -> None:
        """Set the user id. Empty or over-long values clear it."""
        self._set_bounded(USER_ID, user_id)

    def set_description(self, description: Any) -> None:
        """Set the user description. Empty or over-long values clear it."""
        self._set_bounded(DESCRIPTION, description)

    def _set_bounded(self, key: str, value: Any) -> None:
        if not value:
            self._store.delete(key)
            return

        value = str(value).strip()
        if len(value) == 0 or len(value) > MAX_FIELD_LENGTH:
            self._store.delete(key)
            return
        self._store.set(key, value)

    # =========================================================================
    # Plumbing
    # =========================================================================

    def _host(self) -> str:
        return self._store.get(HOST) or DEFAULT_HOST

    async def _send(self, request: OutboundRequest) -> CompletionResult:
        if self._http_client is not None:
            return await dispatch(
                request,
                client=self._http_client,
                default_headers=sdk_headers(),
                debug=self._debug,
            )
        async with create_http_client(timeout=self._timeout_ms / 1000) as client:
            return await dispatch(
                request,
                client=client,
                default_headers=sdk_headers(),
                debug=self._debug,
            )

    @staticmethod
    def _finish(result: ResultT, callback: StatusCallback | None) -> ResultT:
        if callback is not None:
            callback(result.status, *result.extra())
        return result

    # =========================================================================
    # Calls
    # =========================================================================

    async def track_once(self, callback: StatusCallback | None = None) -> TrackResult:
        """Get the current position and send it to Radar.

        Args:
            callback: Optional `callback(status, location, user, events)`;
                only `status` is passed on failure.

        Returns:
            TrackResult with the reported location, user and events.
        """
        publishable_key = self._store.get(PUBLISHABLE_KEY)
        if not publishable_key:
            return self._finish(TrackResult(status=StatusCode.ERROR_PUBLISHABLE_KEY), callback)

        if self._geolocation is None:
            self._log_debug("No geolocation capability configured")
            return self._finish(TrackResult(status=StatusCode.ERROR_LOCATION), callback)

        try:
            coordinates = await self._geolocation.get_current_position()
        except GeolocationError as e:
            self._log_debug(f"Geolocation failed: {e} (code={e.code})")
            status = (
                StatusCode.ERROR_PERMISSIONS if e.permission_denied else StatusCode.ERROR_LOCATION
            )
            return self._finish(TrackResult(status=status), callback)

        if coordinates is None:
            return self._finish(TrackResult(status=StatusCode.ERROR_LOCATION), callback)

        device_id = self._device.get_id()
        user_id = self._store.get(USER_ID)

        body: dict[str, Any] = {
            "accuracy": coordinates.accuracy,
            "description": self._store.get(DESCRIPTION),
            "deviceId": device_id,
            "deviceType": DEVICE_TYPE,
            "foreground": True,
            "latitude": coordinates.latitude,
            "longitude": coordinates.longitude,
            "placesProvider": self._store.get(PLACES_PROVIDER),
            "sdkVersion": __version__,
            "stopped": True,
            "userAgent": USER_AGENT,
            "userId": user_id,
        }

        request = OutboundRequest(
            method="PUT",
            url=f"{self._host()}/v1/users/{quote(user_id or device_id, safe='')}",
            params=body,
            headers={"Authorization": publishable_key},
        )
        completion = await self._send(request)
        if not completion.ok:
            return self._finish(TrackResult(status=completion.status), callback)

        result = TrackResult(
            status=StatusCode.SUCCESS,
            location=coordinates,
            user=extract_response_key(completion.payload, "user"),
            events=extract_response_key(completion.payload, "events"),
        )
        return self._finish(result, callback)

    async def search_places(
        self,
        latitude: float,
        longitude: float,
        radius: int,
        *,
        chains: list[str] | None = None,
        categories: list[str] | None = None,
        groups: list[str] | None = None,
        limit: int = 10,
        callback: StatusCallback | None = None,
    ) -> SearchResult:
        """Search for places near a location.

        Args:
            latitude: Latitude of the search center.
            longitude: Longitude of the search center.
            radius: Search radius in meters.
            chains: Chain slugs to filter by.
            categories: Category names to filter by.
            groups: Group names to filter by.
            limit: Maximum number of places, capped at 100.
            callback: Optional `callback(status, response, places)`.

        Returns:
            SearchResult whose items are the matching places.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "radius": radius,
            "limit": min(limit, MAX_LIMIT),
            "chains": _join(chains),
            "categories": _join(categories),
            "groups": _join(groups),
        }
        return await self._search("/v1/places/search", params, "places", callback)

    async def search_geofences(
        self,
        latitude: float,
        longitude: float,
        *,
        tags: list[str] | None = None,
        limit: int = 10,
        callback: StatusCallback | None = None,
    ) -> SearchResult:
        """Search for geofences near a location.

        Args:
            latitude: Latitude of the search center.
            longitude: Longitude of the search center.
            tags: Geofence tags to filter by.
            limit: Maximum number of geofences, capped at 100.
            callback: Optional `callback(status, response, geofences)`.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "limit": min(limit, MAX_LIMIT),
            "tags": _join(tags),
        }
        return await self._search("/v1/geofences/search", params, "geofences", callback)

    async def geocode(
        self, query: str, *, callback: StatusCallback | None = None
    ) -> SearchResult:
        """Forward geocode an address or place name."""
        return await self._search("/v1/geocode/forward", {"query": query}, "addresses", callback)

    async def reverse_geocode(
        self,
        latitude: float,
        longitude: float,
        *,
        callback: StatusCallback | None = None,
    ) -> SearchResult:
        """Reverse geocode a coordinate into addresses."""
        params = {"latitude": latitude, "longitude": longitude}
        return await self._search("/v1/geocode/reverse", params, "addresses", callback)

    async def ip_geocode(self, *, callback: StatusCallback | None = None) -> SearchResult:
        """Geocode the caller's IP address into regions."""
        return await self._search("/v1/geocode/ip", {}, "regions", callback)

    async def _search(
        self,
        path: str,
        params: dict[str, Any],
        items_key: str,
        callback: StatusCallback | None,
    ) -> SearchResult:
        publishable_key = self._store.get(PUBLISHABLE_KEY)
        if not publishable_key:
            return self._finish(SearchResult(status=StatusCode.ERROR_PUBLISHABLE_KEY), callback)

        request = OutboundRequest(
            method="GET",
            url=f"{self._host()}{path}",
            params=params,
            headers={"Authorization": publishable_key},
        )
        completion = await self._send(request)
        if not completion.ok:
            return self._finish(SearchResult(status=completion.status), callback)

        result = SearchResult(
            status=StatusCode.SUCCESS,
            response=completion.payload,
            items=extract_response_key(completion.payload, items_key),
        )
        return self._finish(result, callback)


def _join(values: list[str] | None) -> str | None:
    """Comma-join a filter list; empty or missing lists are left out of the query."""
    if not values:
        return None
    return ",".join(values)


def get_radar_client(**kwargs: Any) -> RadarClient:
    """Get a Radar client configured from environment variables.

    Returns:
        A configured RadarClient instance.
    """
    return RadarClient.from_env(**kwargs)
