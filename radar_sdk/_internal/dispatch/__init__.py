"""Request dispatcher for Radar API calls.

WARNING: This is a system-level module used by RadarClient.
Prefer the public RadarClient methods in application code.
"""

from radar_sdk._internal.dispatch.client import (
    dispatch,
    extract_response_key,
    merge_headers,
)
from radar_sdk._internal.dispatch.models import CompletionResult, OutboundRequest

__all__ = [
    "dispatch",
    "extract_response_key",
    "merge_headers",
    "CompletionResult",
    "OutboundRequest",
]
