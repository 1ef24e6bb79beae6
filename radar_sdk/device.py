"""Device identifier supplier."""

import uuid
from typing import Protocol

from radar_sdk.storage import DEVICE_ID, ConfigStore


class DeviceIdentity(Protocol):
    def get_id(self) -> str: ...


class StoredDeviceIdentity:
    """Device id persisted in a ConfigStore.

    The first call generates a UUID4 and stores it permanently; later calls
    return the stored value.
    """

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    def get_id(self) -> str:
        device_id = self._store.get(DEVICE_ID)
        if not device_id:
            device_id = str(uuid.uuid4())
            self._store.set(DEVICE_ID, device_id, permanent=True)
        return device_id
