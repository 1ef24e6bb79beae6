"""Geolocation capability used by `RadarClient.track_once`.

Providers return Coordinates or raise GeolocationError. RadarClient turns
those failures into ERROR_PERMISSIONS or ERROR_LOCATION.
"""

from typing import Protocol

from radar_sdk.exceptions import GeolocationError
from radar_sdk.models import Coordinates


class Geolocation(Protocol):
    async def get_current_position(self) -> Coordinates | None: ...


class StaticGeolocation:
    """Geolocation that always reports the same fixed position."""

    def __init__(self, latitude: float, longitude: float, accuracy: float = 0.0) -> None:
        self._coordinates = Coordinates(latitude=latitude, longitude=longitude, accuracy=accuracy)

    async def get_current_position(self) -> Coordinates:
        return self._coordinates


class DeniedGeolocation:
    """Geolocation where the user has refused location access."""

    async def get_current_position(self) -> Coordinates:
        raise GeolocationError("User denied geolocation", code=GeolocationError.PERMISSION_DENIED)
