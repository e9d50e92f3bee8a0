"""Shared test fixtures for the Meilisearch batches client."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import pytest
import structlog

from meilibatches.services.client import Client

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo configure_logging so no test inherits another test's output stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_batch_data() -> dict[str, Any]:
    """A finished batch as returned by GET /batches/{uid}."""
    return {
        "uid": 7,
        "details": {"receivedDocuments": 3, "indexedDocuments": 3},
        "stats": {
            "totalNbTasks": 3,
            "status": {"succeeded": 2, "failed": 1},
            "types": {"documentAdditionOrUpdate": 3},
            "indexUids": {"movies": 3},
            "progressTrace": {"processing tasks > indexing": "12.45ms"},
            "writeChannelCongestion": {
                "attempts": 120,
                "blockingAttempts": 3,
                "blockingRatio": 0.025,
            },
            "internalDatabaseSizes": {
                "externalDocumentsId": "+1.2 KiB",
                "documents": "+6.3 KiB",
                "wordDocids": "+1.1 KiB",
            },
        },
        "duration": "PT0.250518S",
        "startedAt": "2024-10-11T11:49:54.418092Z",
        "finishedAt": "2024-10-11T11:49:54.668610Z",
        "batchStrategy": "size_limit_reached",
    }


@pytest.fixture
def processing_batch_data() -> dict[str, Any]:
    """A batch still being processed, with progress and no finish time."""
    return {
        "uid": 8,
        "progress": {
            "steps": [
                {"currentStep": "processing tasks", "finished": 0, "total": 2},
                {"currentStep": "indexing", "finished": 1, "total": 4},
            ],
            "percentage": 12.5,
        },
        "stats": {
            "totalNbTasks": 1,
            "status": {"processing": 1},
            "types": {"settingsUpdate": 1},
            "indexUids": {"books": 1},
        },
        "duration": None,
        "startedAt": "2024-10-11T11:50:00Z",
        "finishedAt": None,
    }


@pytest.fixture
def mock_http() -> MagicMock:
    """Injected transport double; set ``get.return_value`` to a JSON body."""
    http = MagicMock()
    http.get.return_value = json.dumps({"results": [], "limit": 20, "total": 0})
    return http


@pytest.fixture
def client(mock_http: MagicMock) -> Client:
    """Client wired to the mocked transport."""
    return Client("http://localhost:7700", http_client=mock_http)


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for requests.Response doubles with a status and JSON body."""

    def _make(status_code: int = 200, body: Any = None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.text = body if isinstance(body, str) else json.dumps(body or {})
        return response

    return _make
