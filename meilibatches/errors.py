"""Exception types raised by the Meilisearch batches client."""

from __future__ import annotations

import json
from typing import Any


class MeilisearchClientError(Exception):
    """Base class for every error raised by this package."""


class TransportError(MeilisearchClientError):
    """The request never produced an HTTP response (connection, timeout, TLS)."""


class HttpStatusError(MeilisearchClientError):
    """The server answered with a non-2xx status code.

    Meilisearch error bodies look like
    ``{"message": ..., "code": ..., "type": ..., "link": ...}``; when the body
    has that shape the fields are exposed as attributes.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        payload = _parse_error_body(body)
        self.message: str | None = payload.get("message")
        self.code: str | None = payload.get("code")
        self.error_type: str | None = payload.get("type")
        self.link: str | None = payload.get("link")
        detail = self.message or body or "no response body"
        super().__init__(f"HTTP {status_code}: {detail}")


class BatchNotFoundError(HttpStatusError):
    """No batch exists with the requested uid."""

    def __init__(self, uid: int, body: str) -> None:
        self.uid = uid
        super().__init__(404, body)


class DecodeError(MeilisearchClientError):
    """The response body did not match the expected structure."""

    def __init__(self, message: str, body: str) -> None:
        self.body = body
        super().__init__(message)


def _parse_error_body(body: str) -> dict[str, Any]:
    try:
        payload = json.loads(body)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
