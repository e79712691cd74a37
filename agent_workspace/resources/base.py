from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class Resource(ABC):
    """
    External system an agent can query (database, API, file store).

    Subclasses implement the connection lifecycle and `query`; the base
    tracks whether the resource is connected and provides async context
    manager support.
    """

    def __init__(
        self,
        name: str,
        resource_type: str,
        connection: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._name = name
        self._type = resource_type
        self.connection = dict(connection or {})
        self._connected = False

    def get_name(self) -> str:
        return self._name

    def get_type(self) -> str:
        return self._type

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        if self._connected:
            return
        await self._connect()
        self._connected = True

    async def disconnect(self) -> None:
        if not self._connected:
            return
        await self._disconnect()
        self._connected = False

    async def __aenter__(self) -> "Resource":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.disconnect()

    @abstractmethod
    async def _connect(self) -> None:
        ...

    @abstractmethod
    async def _disconnect(self) -> None:
        ...

    @abstractmethod
    async def query(self, request: Any) -> Any:
        ...
