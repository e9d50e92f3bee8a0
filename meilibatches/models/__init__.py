"""Pydantic data models for the Meilisearch batches API."""

from meilibatches.models.batch import Batch, BatchProgress, BatchProgressStep, BatchStrategy
from meilibatches.models.batch_stats import (
    BatchInternalDatabaseSizes,
    BatchStats,
    BatchWriteChannelCongestion,
    TaskStatus,
    TaskType,
)
from meilibatches.models.batches_results import BatchesResults
from meilibatches.models.config import Config

__all__ = [
    "Batch",
    "BatchInternalDatabaseSizes",
    "BatchProgress",
    "BatchProgressStep",
    "BatchStats",
    "BatchStrategy",
    "BatchWriteChannelCongestion",
    "BatchesResults",
    "Config",
    "TaskStatus",
    "TaskType",
]
