"""Public Pydantic models for the Radar SDK.

Example:
    from radar_sdk.models import Coordinates

    coords = Coordinates(latitude=40.7039, longitude=-73.9867, accuracy=65)
"""

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, Field

from radar_sdk.exceptions import RadarAPIError
from radar_sdk.status import StatusCode


class PlacesProvider(str, Enum):
    """Third-party places database used to enrich tracked locations."""

    NONE = "none"
    FACEBOOK = "facebook"


class Coordinates(BaseModel):
    """A device position."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    accuracy: float = Field(default=0.0, ge=0)


class _CallResult(BaseModel):
    status: StatusCode

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.status.is_success

    def raise_for_status(self) -> Self:
        """Raise RadarAPIError unless the call succeeded."""
        if not self.ok:
            raise RadarAPIError(f"Radar call failed with {self.status.value}", status=self.status)
        return self


class TrackResult(_CallResult):
    """Result of `RadarClient.track_once`.

    `location`, `user` and `events` are only set on SUCCESS.
    """

    location: Coordinates | None = None
    user: Any = None
    events: Any = None

    def extra(self) -> tuple:
        if not self.ok:
            return ()
        return (self.location, self.user, self.events)


class SearchResult(_CallResult):
    """Result of a search or geocode call.

    `response` is the full parsed body; `items` is the endpoint's list
    (places, geofences, addresses or regions).
    """

    response: Any = None
    items: Any = None

    def extra(self) -> tuple:
        if not self.ok:
            return ()
        return (self.response, self.items)


__all__ = ["Coordinates", "PlacesProvider", "TrackResult", "SearchResult"]
