"""Batch statistics models: histograms, congestion and database size reports."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskStatus(StrEnum):
    """Status of a task inside a batch."""

    ENQUEUED = "enqueued"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"


class TaskType(StrEnum):
    """Kind of operation a task performs."""

    INDEX_CREATION = "indexCreation"
    INDEX_UPDATE = "indexUpdate"
    INDEX_DELETION = "indexDeletion"
    INDEX_SWAP = "indexSwap"
    DOCUMENT_ADDITION_OR_UPDATE = "documentAdditionOrUpdate"
    DOCUMENT_DELETION = "documentDeletion"
    SETTINGS_UPDATE = "settingsUpdate"
    DUMP_CREATION = "dumpCreation"
    TASK_CANCELATION = "taskCancelation"
    TASK_DELETION = "taskDeletion"
    UPGRADE_DATABASE = "upgradeDatabase"
    DOCUMENT_EDITION = "documentEdition"
    SNAPSHOT_CREATION = "snapshotCreation"


class BatchWriteChannelCongestion(BaseModel):
    """How often the indexer blocked while writing to its channel."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
    )

    attempts: int
    blocking_attempts: int
    blocking_ratio: float


class BatchInternalDatabaseSizes(BaseModel):
    """Size deltas of the internal databases, as human readable strings.

    Databases the server reports beyond the known ones are kept as extra
    attributes.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow"
    )

    external_documents_id: str | None = None
    word_docs_id: str | None = None
    word_pair_proximity_ids: str | None = None
    word_position_doc_ids: str | None = None
    word_fid_doc_ids: str | None = None
    field_id_word_count_doc_ids: str | None = None
    documents: str | None = None


class BatchStats(BaseModel):
    """Aggregate counters reported for a batch.

    ``status``, ``types`` and ``index_uids`` are sparse histograms: a category
    missing from the mapping was not reported and counts as zero.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
    )

    total_nb_tasks: int = 0
    status: dict[str, int] = Field(default_factory=dict)
    types: dict[str, int] = Field(default_factory=dict)
    index_uids: dict[str, int] = Field(default_factory=dict)
    progress_trace: dict[str, str] = Field(default_factory=dict)
    write_channel_congestion: BatchWriteChannelCongestion | None = None
    internal_database_sizes: BatchInternalDatabaseSizes | None = None

    def status_count(self, status: TaskStatus | str) -> int:
        """Number of tasks in the given status, zero when unreported."""
        return self.status.get(str(status), 0)

    def type_count(self, task_type: TaskType | str) -> int:
        """Number of tasks of the given type, zero when unreported."""
        return self.types.get(str(task_type), 0)
