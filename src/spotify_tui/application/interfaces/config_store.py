"""Port interface for the persisted client configuration."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClientConfigStore(ABC):
    """Small key/value store holding the selected output device and similar settings."""

    @property
    @abstractmethod
    def device_id(self) -> str | None:
        """The selected output device, as last loaded or written."""
        ...

    @abstractmethod
    async def load(self) -> None:
        """Read persisted values into memory."""
        ...

    @abstractmethod
    async def set_device_id(self, device_id: str) -> None:
        """Persist the selected device.

        Raises:
            ConfigPersistenceError: If the value could not be written.
        """
        ...

    @abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None: ...
