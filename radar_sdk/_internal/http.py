"""Shared HTTP client configuration."""

import httpx

from radar_sdk._version import __version__

DEFAULT_HOST = "https://api.radar.io"
DEFAULT_TIMEOUT = 10.0
DEVICE_TYPE = "Web"
USER_AGENT = f"radar-sdk-python/{__version__}"


def sdk_headers() -> dict[str, str]:
    """Fixed headers attached to every Radar request."""
    return {
        "X-Radar-SDK-Version": __version__,
        "X-Radar-Device-Type": DEVICE_TYPE,
    }


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": USER_AGENT},
    )
