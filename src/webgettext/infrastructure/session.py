"""Session boundary: where the active locale persists between requests."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionHandler(Protocol):
    """Read/write capability for the current locale code."""

    def get(self, default: str) -> str: ...

    def set(self, locale: str) -> None: ...


class MappingSessionHandler:
    """Store the locale under one key of a mutable mapping.

    Any dict-like session object works (a framework session, or a plain
    ``dict`` in tests and scripts).
    """

    def __init__(
        self,
        storage: MutableMapping[str, Any] | None = None,
        key: str = "webgettext-locale",
    ) -> None:
        self._storage: MutableMapping[str, Any] = {} if storage is None else storage
        self.key = key

    def get(self, default: str) -> str:
        value = self._storage.get(self.key)
        return value if value else default

    def set(self, locale: str) -> None:
        self._storage[self.key] = locale
