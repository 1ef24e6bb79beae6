"""Redaction of credentials in debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "publishable_key",
    "publishablekey",
    "api_key",
    "secret_key",
    "token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact sensitive keys from headers or a request body.

    Creates a deep copy - the original payload is never mutated.

    Args:
        payload: The dictionary to redact sensitive values from.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(payload)


def _redact_recursive(obj: Any) -> Any:
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, list):
        return [_redact_recursive(item) for item in obj]
    else:
        return obj

