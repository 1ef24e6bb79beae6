"""Status codes shared by every Radar call.

Every call terminates in exactly one of these values.
"""

from enum import Enum

import httpx


class StatusCode(str, Enum):
    """Closed set of outcomes for a Radar call."""

    SUCCESS = "SUCCESS"
    ERROR_PUBLISHABLE_KEY = "ERROR_PUBLISHABLE_KEY"
    ERROR_PERMISSIONS = "ERROR_PERMISSIONS"
    ERROR_LOCATION = "ERROR_LOCATION"
    ERROR_NETWORK = "ERROR_NETWORK"
    ERROR_BAD_REQUEST = "ERROR_BAD_REQUEST"
    ERROR_UNAUTHORIZED = "ERROR_UNAUTHORIZED"
    ERROR_PAYMENT_REQUIRED = "ERROR_PAYMENT_REQUIRED"
    ERROR_FORBIDDEN = "ERROR_FORBIDDEN"
    ERROR_NOT_FOUND = "ERROR_NOT_FOUND"
    ERROR_RATE_LIMIT = "ERROR_RATE_LIMIT"
    ERROR_SERVER = "ERROR_SERVER"
    ERROR_UNKNOWN = "ERROR_UNKNOWN"

    @property
    def is_success(self) -> bool:
        return self is StatusCode.SUCCESS


HTTP_STATUS_MAP: dict[int, StatusCode] = {
    200: StatusCode.SUCCESS,
    201: StatusCode.SUCCESS,
    204: StatusCode.SUCCESS,
    400: StatusCode.ERROR_BAD_REQUEST,
    401: StatusCode.ERROR_UNAUTHORIZED,
    402: StatusCode.ERROR_PAYMENT_REQUIRED,
    403: StatusCode.ERROR_FORBIDDEN,
    404: StatusCode.ERROR_NOT_FOUND,
    429: StatusCode.ERROR_RATE_LIMIT,
}


def status_from_http(status_code: int) -> StatusCode:
    """Map an HTTP response status to a StatusCode.

    Args:
        status_code: The numeric HTTP status.

    Returns:
        The mapped StatusCode. Any 5xx is ERROR_SERVER; codes that are not
        listed map to ERROR_UNKNOWN.
    """
    if status_code in HTTP_STATUS_MAP:
        return HTTP_STATUS_MAP[status_code]
    if 500 <= status_code < 600:
        return StatusCode.ERROR_SERVER
    return StatusCode.ERROR_UNKNOWN


def status_from_transport_error(error: BaseException) -> StatusCode:
    """Map a failure that produced no HTTP response to a StatusCode."""
    if isinstance(error, httpx.TimeoutException):
        return StatusCode.ERROR_NETWORK
    return StatusCode.ERROR_SERVER
