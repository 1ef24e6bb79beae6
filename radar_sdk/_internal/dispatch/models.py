"""Pydantic models for the request dispatcher.

An OutboundRequest is consumed once by `dispatch`; the CompletionResult it
produces is delivered exactly once.
"""

from typing import Any, Literal

from pydantic import BaseModel, model_validator

from radar_sdk.exceptions import RadarAPIError
from radar_sdk.status import StatusCode

# =============================================================================
# Constants
# =============================================================================

HttpMethod = Literal["GET", "PUT", "POST", "DELETE"]
BODY_METHODS: frozenset[str] = frozenset({"PUT", "POST"})

ParamValue = str | int | float | bool | None

# =============================================================================
# Request
# =============================================================================


class OutboundRequest(BaseModel):
    """A single logical API call.

    Required fields:
        method: HTTP verb (GET, PUT, POST, DELETE)
        url: Absolute request URL

    Optional fields:
        params: Query parameters (GET/DELETE) or JSON body fields (PUT/POST)
        headers: Caller headers, Authorization included
        response_key: Field to extract from the parsed JSON body
    """

    method: HttpMethod
    url: str
    params: dict[str, ParamValue] = {}
    headers: dict[str, str] | None = None
    response_key: str | None = None

    model_config = {"frozen": True}

    @property
    def sends_body(self) -> bool:
        """Whether params travel as a JSON body rather than a query string."""
        return self.method in BODY_METHODS

    def query_params(self) -> dict[str, ParamValue]:
        """Params to append to the URL, None values dropped."""
        if self.sends_body:
            return {}
        return {key: value for key, value in self.params.items() if value is not None}


# =============================================================================
# Result
# =============================================================================


class CompletionResult(BaseModel):
    """Outcome of one dispatched request.

    `payload` is only ever set when `status` is SUCCESS. It holds the parsed
    JSON body, or the value under `response_key` when one was requested.
    """

    status: StatusCode
    payload: Any = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def payload_only_on_success(self) -> "CompletionResult":
        if self.payload is not None and not self.status.is_success:
            raise ValueError("payload is only allowed on SUCCESS")
        return self

    @property
    def ok(self) -> bool:
        return self.status.is_success

    def raise_for_status(self) -> "CompletionResult":
        """Raise RadarAPIError unless the request succeeded."""
        if not self.ok:
            raise RadarAPIError(f"Request failed with {self.status.value}", status=self.status)
        return self
