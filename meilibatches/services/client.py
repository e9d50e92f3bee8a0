"""Client for the Meilisearch batches API."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TypeVar

import structlog
from pydantic import ValidationError

from meilibatches.errors import (
    BatchNotFoundError,
    DecodeError,
    HttpStatusError,
    MeilisearchClientError,
)
from meilibatches.models.batch import Batch
from meilibatches.models.batches_results import BatchesResults
from meilibatches.services.batches_query import BatchesQuery
from meilibatches.services.http_client import RequestsHttpClient

if TYPE_CHECKING:
    from collections.abc import Iterator

    from meilibatches.models.config import Config
    from meilibatches.services.protocols import HttpClientProtocol

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", Batch, BatchesResults)


class Client:
    """Read-only access to a server's batches.

    All I/O goes through the injected ``http_client``; retries, timeouts and
    connection handling are its concern. Every call issues a fresh request.
    """

    def __init__(
        self,
        url: str,
        api_key: str | None = None,
        http_client: HttpClientProtocol | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.http_client = http_client or RequestsHttpClient(self.url, api_key=api_key)

    @classmethod
    def from_config(cls, config: Config) -> Client:
        """Build a client and its requests transport from configuration."""
        http_client = RequestsHttpClient(
            config.meilisearch_url,
            api_key=config.meilisearch_api_key,
            timeout=config.request_timeout,
            max_attempts=config.max_retry_attempts + 1,
        )
        return cls(config.meilisearch_url, http_client=http_client)

    def batches_query(self) -> BatchesQuery:
        """Start a query builder bound to this client."""
        return BatchesQuery(self)

    def get_batches(self) -> BatchesResults:
        """List batches with server defaults."""
        return self.get_batches_with(BatchesQuery(self))

    def get_batches_with(self, query: BatchesQuery) -> BatchesResults:
        """List batches matching the query's filters."""
        return self._fetch_batches(query.to_params())

    def get_batch(self, uid: int) -> Batch:
        """Fetch a single batch.

        Raises:
            BatchNotFoundError: The server has no batch with this uid.
            DecodeError: The body is not a batch object.
        """
        try:
            body = self.http_client.get(f"batches/{uid}")
        except HttpStatusError as exc:
            if exc.status_code == 404:
                raise BatchNotFoundError(uid, exc.body) from exc
            raise

        batch = _decode(Batch, body)
        logger.debug("batch_fetched", uid=batch.uid, strategy=batch.batch_strategy)
        return batch

    def iter_batches(self, query: BatchesQuery | None = None) -> Iterator[Batch]:
        """Yield every batch matching the query, following ``next`` cursors.

        One request is issued per page, lazily, as the iterator is consumed.
        """
        params = (query or BatchesQuery(self)).to_params()
        while True:
            page = self._fetch_batches(params)
            yield from page.results
            if not page.has_next_page:
                return
            params = {**params, "from": str(page.next)}

    def is_healthy(self) -> bool:
        """Check if the server reports itself as available."""
        try:
            body = self.http_client.get("health")
        except MeilisearchClientError as exc:
            logger.warning("health_check_failed", url=self.url, error=str(exc))
            return False
        try:
            payload = json.loads(body)
        except ValueError:
            return False
        return isinstance(payload, dict) and payload.get("status") == "available"

    def _fetch_batches(self, params: dict[str, str]) -> BatchesResults:
        body = self.http_client.get("batches", params=params)
        page = _decode(BatchesResults, body)
        logger.debug(
            "batches_fetched",
            count=len(page.results),
            total=page.total,
            next=page.next,
        )
        return page


def _decode(model: type[ModelT], body: str) -> ModelT:
    """Validate a JSON body into ``model``, raising DecodeError on mismatch."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"Invalid {model.__name__} response: {exc}", body) from exc
