"""Configuration store for Radar settings.

RadarClient reads every setting fresh from the store on each call, so a
store can be shared and updated between calls.
"""

from typing import Protocol

PUBLISHABLE_KEY = "radar-publishableKey"
HOST = "radar-host"
USER_ID = "radar-userId"
DESCRIPTION = "radar-description"
PLACES_PROVIDER = "radar-placesProvider"
DEVICE_ID = "radar-deviceId"


class ConfigStore(Protocol):
    """Key-value store for SDK settings."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str, permanent: bool = False) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryConfigStore:
    """In-process ConfigStore.

    Values written with `permanent=True` survive `clear_session()`; all
    others are dropped by it.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._permanent: set[str] = set()

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str, permanent: bool = False) -> None:
        self._values[key] = value
        if permanent:
            self._permanent.add(key)
        else:
            self._permanent.discard(key)

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
        self._permanent.discard(key)

    def clear_session(self) -> None:
        """Drop every value that was not stored as permanent."""
        self._values = {k: v for k, v in self._values.items() if k in self._permanent}

    def __contains__(self, key: object) -> bool:
        return key in self._values
