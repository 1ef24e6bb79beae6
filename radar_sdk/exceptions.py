"""Public exceptions for the Radar SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from radar_sdk.status import StatusCode


class RadarError(Exception):
    """Base exception for all Radar SDK errors."""


class RadarAPIError(RadarError):
    """A call completed with a non-success status."""

    def __init__(self, message: str, status: StatusCode | None = None) -> None:
        super().__init__(message)
        self.status = status


class GeolocationError(RadarError):
    """Position could not be acquired.

    Codes follow the W3C GeolocationPositionError values.
    """

    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code

    @property
    def permission_denied(self) -> bool:
        return self.code == self.PERMISSION_DENIED
