"""Serialization of batch query filters into HTTP query parameters."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Wire names of the timestamp bounds accepted by GET /batches.
TIMESTAMP_PARAMS: tuple[str, ...] = (
    "beforeEnqueuedAt",
    "beforeStartedAt",
    "beforeFinishedAt",
    "afterEnqueuedAt",
    "afterStartedAt",
    "afterFinishedAt",
)


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC 3339 text.

    Naive datetimes are taken to be UTC. UTC is rendered with a ``Z`` suffix,
    other offsets as ``+HH:MM``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def join_values(values: Iterable[object]) -> str:
    """Comma-join identifiers or categories the way the server expects."""
    return ",".join(str(value) for value in values)


def format_bool(value: bool) -> str:
    """Render a boolean as the lowercase literal used in query strings."""
    return "true" if value else "false"


def build_batches_params(
    *,
    uids: Iterable[int] = (),
    batch_uids: Iterable[int] = (),
    index_uids: Iterable[str] = (),
    statuses: Iterable[str] = (),
    types: Iterable[str] = (),
    limit: int | None = None,
    from_: int | None = None,
    reverse: bool = False,
    timestamps: Mapping[str, datetime | None] | None = None,
) -> dict[str, str]:
    """Build the query parameters for GET /batches.

    Empty collections and unset optionals are left out. ``reverse`` is always
    present since it has a concrete default.

    Args:
        uids: Task uids contained in the batches.
        batch_uids: Batch uids.
        index_uids: Indexes touched by the batches.
        statuses: Task statuses contained in the batches.
        types: Task types contained in the batches.
        limit: Maximum number of batches to return.
        from_: Uid of the first batch to return.
        reverse: Oldest first when True.
        timestamps: Mapping of wire name (see TIMESTAMP_PARAMS) to bound.

    Returns:
        Dict of parameter name to string value.
    """
    params: dict[str, str] = {}

    for name, values in (
        ("uids", list(uids)),
        ("batchUids", list(batch_uids)),
        ("indexUids", list(index_uids)),
        ("statuses", list(statuses)),
        ("types", list(types)),
    ):
        if values:
            params[name] = join_values(values)

    if limit is not None:
        params["limit"] = str(limit)
    if from_ is not None:
        params["from"] = str(from_)
    params["reverse"] = format_bool(reverse)

    for name in TIMESTAMP_PARAMS:
        bound = (timestamps or {}).get(name)
        if bound is not None:
            params[name] = format_rfc3339(bound)

    return params
