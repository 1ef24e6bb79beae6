"""Tests for the bundled geolocation providers."""

import pytest
from pydantic import ValidationError

from radar_sdk.exceptions import GeolocationError
from radar_sdk.geolocation import DeniedGeolocation, StaticGeolocation
from radar_sdk.models import Coordinates


class TestStaticGeolocation:
    """Tests for StaticGeolocation."""

    @pytest.mark.asyncio
    async def test_returns_fixed_position(self):
        """Should report the configured coordinates."""
        position = await StaticGeolocation(40.7039, -73.9867, 65).get_current_position()
        assert position == Coordinates(latitude=40.7039, longitude=-73.9867, accuracy=65)

    @pytest.mark.asyncio
    async def test_default_accuracy(self):
        position = await StaticGeolocation(1.0, 2.0).get_current_position()
        assert position.accuracy == 0.0

    def test_rejects_out_of_range_coordinates(self):
        """Should validate coordinates on construction."""
        with pytest.raises(ValidationError):
            StaticGeolocation(91, 0)


class TestDeniedGeolocation:
    """Tests for DeniedGeolocation."""

    @pytest.mark.asyncio
    async def test_raises_permission_denied(self):
        """Should fail with the permission-denied code."""
        with pytest.raises(GeolocationError) as exc_info:
            await DeniedGeolocation().get_current_position()
        assert exc_info.value.permission_denied is True
        assert exc_info.value.code == GeolocationError.PERMISSION_DENIED


class TestCoordinates:
    """Tests for the Coordinates model."""

    def test_coordinates_range(self):
        with pytest.raises(ValidationError):
            Coordinates(latitude=91, longitude=0)
        with pytest.raises(ValidationError):
            Coordinates(latitude=0, longitude=181)
        with pytest.raises(ValidationError):
            Coordinates(latitude=0, longitude=0, accuracy=-1)
