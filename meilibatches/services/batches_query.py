"""Chainable query builder for listing batches."""

from __future__ import annotations

from typing import TYPE_CHECKING

from meilibatches.core.query_params import build_batches_params

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from meilibatches.models.batches_results import BatchesResults
    from meilibatches.services.client import Client


class BatchesQuery:
    """Filters and pagination for GET /batches.

    Every ``with_*`` setter stores its value and returns the builder, so calls
    can be chained. Nothing is validated locally; the server decides what a
    zero or negative limit means. A builder is meant to be used by a single
    caller at a time.

    Example:
        results = (
            BatchesQuery(client)
            .with_index_uids(["movies"])
            .with_limit(20)
            .execute()
        )
    """

    def __init__(self, client: Client) -> None:
        self.client = client
        self.uids: list[int] = []
        self.batch_uids: list[int] = []
        self.index_uids: list[str] = []
        self.statuses: list[str] = []
        self.types: list[str] = []
        self.limit: int | None = None
        self.from_: int | None = None
        self.reverse: bool = False
        self.before_enqueued_at: datetime | None = None
        self.before_started_at: datetime | None = None
        self.before_finished_at: datetime | None = None
        self.after_enqueued_at: datetime | None = None
        self.after_started_at: datetime | None = None
        self.after_finished_at: datetime | None = None

    def with_uids(self, uids: Iterable[int]) -> BatchesQuery:
        """Select batches containing the tasks with these uids."""
        self.uids = list(uids)
        return self

    def with_batch_uids(self, batch_uids: Iterable[int]) -> BatchesQuery:
        """Select batches by their own uid."""
        self.batch_uids = list(batch_uids)
        return self

    def with_index_uids(self, index_uids: Iterable[str]) -> BatchesQuery:
        """Select batches containing tasks on these indexes."""
        self.index_uids = list(index_uids)
        return self

    def with_statuses(self, statuses: Iterable[str]) -> BatchesQuery:
        """Select batches containing tasks with these statuses (see TaskStatus)."""
        self.statuses = [str(status) for status in statuses]
        return self

    def with_types(self, types: Iterable[str]) -> BatchesQuery:
        """Select batches containing tasks of these types (see TaskType)."""
        self.types = [str(task_type) for task_type in types]
        return self

    def with_limit(self, limit: int) -> BatchesQuery:
        self.limit = limit
        return self

    def with_from(self, from_: int) -> BatchesQuery:
        self.from_ = from_
        return self

    def with_reverse(self, reverse: bool = True) -> BatchesQuery:
        """Return batches oldest first instead of most recent first."""
        self.reverse = reverse
        return self

    def with_before_enqueued_at(self, value: datetime) -> BatchesQuery:
        self.before_enqueued_at = value
        return self

    def with_before_started_at(self, value: datetime) -> BatchesQuery:
        self.before_started_at = value
        return self

    def with_before_finished_at(self, value: datetime) -> BatchesQuery:
        self.before_finished_at = value
        return self

    def with_after_enqueued_at(self, value: datetime) -> BatchesQuery:
        self.after_enqueued_at = value
        return self

    def with_after_started_at(self, value: datetime) -> BatchesQuery:
        self.after_started_at = value
        return self

    def with_after_finished_at(self, value: datetime) -> BatchesQuery:
        self.after_finished_at = value
        return self

    def to_params(self) -> dict[str, str]:
        """Query parameters for this builder; unset and empty filters are omitted."""
        return build_batches_params(
            uids=self.uids,
            batch_uids=self.batch_uids,
            index_uids=self.index_uids,
            statuses=self.statuses,
            types=self.types,
            limit=self.limit,
            from_=self.from_,
            reverse=self.reverse,
            timestamps={
                "beforeEnqueuedAt": self.before_enqueued_at,
                "beforeStartedAt": self.before_started_at,
                "beforeFinishedAt": self.before_finished_at,
                "afterEnqueuedAt": self.after_enqueued_at,
                "afterStartedAt": self.after_started_at,
                "afterFinishedAt": self.after_finished_at,
            },
        )

    def execute(self) -> BatchesResults:
        """Run the query against the bound client."""
        return self.client.get_batches_with(self)
