"""Service protocols defining interfaces for dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class HttpClientProtocol(Protocol):
    """Transport used by the client to reach the server.

    Implementations return the raw response body of a 2xx response and raise
    TransportError or HttpStatusError otherwise.
    """

    def get(self, path: str, params: Mapping[str, str] | None = None) -> str: ...
