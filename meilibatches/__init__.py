"""Typed client for the Meilisearch batches API."""

__version__ = "0.1.0"

from meilibatches.errors import (  # noqa: E402
    BatchNotFoundError,
    DecodeError,
    HttpStatusError,
    MeilisearchClientError,
    TransportError,
)
from meilibatches.models import (  # noqa: E402
    Batch,
    BatchesResults,
    BatchProgress,
    BatchProgressStep,
    BatchStats,
    BatchStrategy,
    TaskStatus,
    TaskType,
)
from meilibatches.services.batches_query import BatchesQuery  # noqa: E402
from meilibatches.services.client import Client  # noqa: E402
from meilibatches.services.http_client import RequestsHttpClient  # noqa: E402

__all__ = [
    "Batch",
    "BatchNotFoundError",
    "BatchProgress",
    "BatchProgressStep",
    "BatchStats",
    "BatchStrategy",
    "BatchesQuery",
    "BatchesResults",
    "Client",
    "DecodeError",
    "HttpStatusError",
    "MeilisearchClientError",
    "RequestsHttpClient",
    "TaskStatus",
    "TaskType",
    "TransportError",
    "__version__",
]
