"""Request dispatcher for Radar API calls.

`dispatch` issues exactly one request and resolves to exactly one
CompletionResult. Transport, protocol and malformed-response failures are
all reported as a StatusCode; none of them raise.
"""

import sys
from collections.abc import Callable
from typing import Any

import httpx

from radar_sdk._internal.dispatch.models import CompletionResult, OutboundRequest
from radar_sdk._internal.dispatch.redaction import redact_payload
from radar_sdk._internal.http import create_http_client
from radar_sdk.status import StatusCode, status_from_http, status_from_transport_error

CompletionCallback = Callable[[CompletionResult], None]


def _log_debug(debug: bool, message: str) -> None:
    """Log a debug message to stderr if debug mode is enabled."""
    if debug:
        print(f"[radar-sdk] {message}", file=sys.stderr)


def extract_response_key(body: Any, key: str) -> Any:
    """Return `body[key]`, or None when the body is not an object or lacks the key."""
    if isinstance(body, dict):
        return body.get(key)
    return None


def merge_headers(
    request: OutboundRequest, default_headers: dict[str, str] | None = None
) -> dict[str, str]:
    """Overlay the request's own headers on the calling context's fixed headers."""
    headers = dict(default_headers or {})
    headers.update(request.headers or {})
    return headers


async def dispatch(
    request: OutboundRequest,
    on_done: CompletionCallback | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    default_headers: dict[str, str] | None = None,
    debug: bool = False,
) -> CompletionResult:
    """Send one request and classify its outcome.

    Args:
        request: The request to send. GET/DELETE params go in the query
            string, PUT/POST params are sent as a JSON body.
        on_done: Optional continuation, called exactly once with the result.
        client: Optional shared AsyncClient. A short-lived client is created
            and closed when omitted.
        default_headers: Fixed headers from the calling context. Request
            headers win on key collision.
        debug: Enable debug logging to stderr.

    Returns:
        The CompletionResult also passed to `on_done`.
    """
    result = await _perform(request, client=client, default_headers=default_headers, debug=debug)
    _log_debug(debug, f"{request.method} {request.url} -> {result.status.value}")

    if on_done is not None:
        on_done(result)
    return result


async def _perform(
    request: OutboundRequest,
    *,
    client: httpx.AsyncClient | None,
    default_headers: dict[str, str] | None,
    debug: bool,
) -> CompletionResult:
    headers = merge_headers(request, default_headers)
    _log_debug(debug, f"Sending {request.method} {request.url} headers={redact_payload(headers)}")

    try:
        if client is None:
            async with create_http_client() as owned_client:
                response = await _send(owned_client, request, headers)
        else:
            response = await _send(client, request, headers)
    except Exception as e:
        _log_debug(debug, f"Transport error: {e!r}")
        return CompletionResult(status=status_from_transport_error(e))

    return _classify(request, response, debug)


async def _send(
    client: httpx.AsyncClient, request: OutboundRequest, headers: dict[str, str]
) -> httpx.Response:
    if request.sends_body:
        return await client.request(
            request.method,
            request.url,
            json=request.params or None,
            headers=headers,
        )
    return await client.request(
        request.method,
        request.url,
        params=request.query_params() or None,
        headers=headers,
    )


def _classify(request: OutboundRequest, response: httpx.Response, debug: bool) -> CompletionResult:
    status = status_from_http(response.status_code)
    if not status.is_success:
        # Error bodies are discarded unparsed
        return CompletionResult(status=status)

    if response.status_code == 204 and not response.content:
        return CompletionResult(status=StatusCode.SUCCESS)

    try:
        body = response.json()
    except (ValueError, RecursionError):
        _log_debug(debug, f"Malformed JSON in {response.status_code} response")
        return CompletionResult(status=StatusCode.ERROR_SERVER)

    if request.response_key is None:
        return CompletionResult(status=StatusCode.SUCCESS, payload=body)
    return CompletionResult(
        status=StatusCode.SUCCESS,
        payload=extract_response_key(body, request.response_key),
    )
