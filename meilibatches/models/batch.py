"""Batch model mirroring the server's batch JSON object."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from meilibatches.models.batch_stats import BatchStats


class BatchStrategy(StrEnum):
    """Reason the server's autobatcher stopped adding tasks to a batch.

    Values the client does not know yet decode to ``UNKNOWN`` instead of
    failing, so newer servers keep working with older clients.
    """

    SIZE_LIMIT_REACHED = "size_limit_reached"
    TIME_LIMIT_REACHED = "time_limit_reached"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> BatchStrategy:
        return cls.UNKNOWN


class BatchProgressStep(BaseModel):
    """One named phase of an in-flight batch."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
    )

    current_step: str
    finished: int
    total: int


class BatchProgress(BaseModel):
    """Snapshot of the completion state of a processing batch."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    steps: list[BatchProgressStep] = Field(default_factory=list)
    percentage: float


class Batch(BaseModel):
    """A server-side group of tasks processed together."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
    )

    uid: int
    progress: BatchProgress | None = None
    details: dict[str, Any] = Field(default_factory=dict)
    stats: BatchStats = Field(default_factory=BatchStats)
    # ISO 8601 duration, e.g. "PT0.250518S"
    duration: str | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
    # Reported by Meilisearch v1.15 and later.
    batch_strategy: BatchStrategy | None = None

    @property
    def is_finished(self) -> bool:
        """Whether the server has finished processing the batch."""
        return self.finished_at is not None
