"""Paginated envelope returned by the list batches endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from meilibatches.models.batch import Batch


class BatchesResults(BaseModel):
    """One page of batches plus its pagination cursors."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    results: list[Batch] = Field(default_factory=list)
    total: int
    limit: int
    from_: int | None = Field(default=None, alias="from")
    next: int | None = None

    @property
    def has_next_page(self) -> bool:
        """A missing ``next`` cursor marks the last page."""
        return self.next is not None
