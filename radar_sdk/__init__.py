"""Radar SDK for Python.

This SDK reports device location to Radar and queries its place search,
geofence search and geocoding APIs.

Public API:
    RadarClient - Tracking, search and geocoding calls
    StatusCode - Outcome of every call

Internal (system-level, not for direct use):
    _internal.dispatch - Request dispatcher
"""

from radar_sdk._version import __version__
from radar_sdk.client import RadarClient, get_radar_client
from radar_sdk.device import StoredDeviceIdentity
from radar_sdk.exceptions import GeolocationError, RadarAPIError, RadarError
from radar_sdk.geolocation import StaticGeolocation
from radar_sdk.models import Coordinates, PlacesProvider, SearchResult, TrackResult
from radar_sdk.status import StatusCode
from radar_sdk.storage import MemoryConfigStore

__all__ = [
    "__version__",
    "RadarClient",
    "get_radar_client",
    "StatusCode",
    "Coordinates",
    "PlacesProvider",
    "TrackResult",
    "SearchResult",
    "MemoryConfigStore",
    "StoredDeviceIdentity",
    "StaticGeolocation",
    "RadarError",
    "RadarAPIError",
    "GeolocationError",
]
