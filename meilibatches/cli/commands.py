"""CLI command implementations for the Meilisearch batches client."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from meilibatches.errors import BatchNotFoundError, MeilisearchClientError
from meilibatches.models.batch_stats import TaskStatus, TaskType
from meilibatches.models.config import Config
from meilibatches.services.client import Client
from meilibatches.utils.logger import configure_logging

if TYPE_CHECKING:
    from datetime import datetime

    from meilibatches.models.batch import Batch

_DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]


def _get_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()


def _get_client(config: Config) -> Client:
    """Build a client from configuration."""
    return Client.from_config(config)


def _batch_summary(batch: Batch) -> dict[str, Any]:
    return {
        "uid": batch.uid,
        "strategy": batch.batch_strategy.value if batch.batch_strategy else None,
        "total_nb_tasks": batch.stats.total_nb_tasks,
        "status": dict(batch.stats.status),
        "indexes": sorted(batch.stats.index_uids),
        "duration": batch.duration,
        "started_at": batch.started_at.isoformat() if batch.started_at else None,
        "finished_at": batch.finished_at.isoformat() if batch.finished_at else None,
    }


def _print_batch(batch: Batch) -> None:
    """Print a one-line summary of a batch."""
    summary = _batch_summary(batch)
    statuses = ", ".join(f"{name}={count}" for name, count in summary["status"].items())
    click.echo(
        f"  #{summary['uid']}: {summary['total_nb_tasks']} task(s)"
        f" [{statuses or 'no status'}]"
        f" strategy={summary['strategy'] or '-'}"
        f" duration={summary['duration'] or '-'}"
    )


@click.command()
@click.option("--uid", "uids", multiple=True, type=int, help="Task uid (repeatable)")
@click.option("--batch-uid", "batch_uids", multiple=True, type=int, help="Batch uid (repeatable)")
@click.option("--index-uid", "index_uids", multiple=True, help="Index uid (repeatable)")
@click.option(
    "--status",
    "statuses",
    multiple=True,
    type=click.Choice([status.value for status in TaskStatus]),
    help="Task status (repeatable)",
)
@click.option(
    "--type",
    "types",
    multiple=True,
    type=click.Choice([task_type.value for task_type in TaskType]),
    help="Task type (repeatable)",
)
@click.option("--limit", type=int, default=None, help="Maximum batches per page")
@click.option("--from", "from_", type=int, default=None, help="Uid of the first batch")
@click.option("--reverse", is_flag=True, help="Oldest batches first")
@click.option("--before-enqueued-at", type=click.DateTime(_DATETIME_FORMATS), default=None)
@click.option("--before-started-at", type=click.DateTime(_DATETIME_FORMATS), default=None)
@click.option("--before-finished-at", type=click.DateTime(_DATETIME_FORMATS), default=None)
@click.option("--after-enqueued-at", type=click.DateTime(_DATETIME_FORMATS), default=None)
@click.option("--after-started-at", type=click.DateTime(_DATETIME_FORMATS), default=None)
@click.option("--after-finished-at", type=click.DateTime(_DATETIME_FORMATS), default=None)
@click.option("--all", "fetch_all", is_flag=True, help="Follow cursors through every page")
@click.option(
    "--output-format",
    default="summary",
    type=click.Choice(["summary", "json"]),
    help="Output format",
)
def list_batches(
    uids: tuple[int, ...],
    batch_uids: tuple[int, ...],
    index_uids: tuple[str, ...],
    statuses: tuple[str, ...],
    types: tuple[str, ...],
    limit: int | None,
    from_: int | None,
    reverse: bool,
    before_enqueued_at: datetime | None,
    before_started_at: datetime | None,
    before_finished_at: datetime | None,
    after_enqueued_at: datetime | None,
    after_started_at: datetime | None,
    after_finished_at: datetime | None,
    fetch_all: bool,
    output_format: str,
) -> None:
    """List batches, optionally filtered."""
    config = _get_config()
    configure_logging(config.log_level)
    client = _get_client(config)

    query = (
        client.batches_query()
        .with_uids(uids)
        .with_batch_uids(batch_uids)
        .with_index_uids(index_uids)
        .with_statuses(statuses)
        .with_types(types)
        .with_reverse(reverse)
    )
    if limit is not None:
        query.with_limit(limit)
    if from_ is not None:
        query.with_from(from_)
    bounds = [
        (query.with_before_enqueued_at, before_enqueued_at),
        (query.with_before_started_at, before_started_at),
        (query.with_before_finished_at, before_finished_at),
        (query.with_after_enqueued_at, after_enqueued_at),
        (query.with_after_started_at, after_started_at),
        (query.with_after_finished_at, after_finished_at),
    ]
    for setter, value in bounds:
        if value is not None:
            setter(value)

    try:
        if fetch_all:
            batches = list(client.iter_batches(query))
            total, next_cursor = len(batches), None
        else:
            page = query.execute()
            batches, total, next_cursor = page.results, page.total, page.next
    except MeilisearchClientError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        payload = {
            "results": [_batch_summary(batch) for batch in batches],
            "total": total,
            "next": next_cursor,
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"[INFO] {len(batches)} of {total} batch(es)")
    for batch in batches:
        _print_batch(batch)
    if next_cursor is not None:
        click.echo(f"[INFO] More batches available, continue with --from {next_cursor}")


@click.command()
@click.argument("uid", type=int)
@click.option(
    "--output-format",
    default="summary",
    type=click.Choice(["summary", "json"]),
    help="Output format",
)
def get_batch(uid: int, output_format: str) -> None:
    """Show a single batch by uid."""
    config = _get_config()
    configure_logging(config.log_level)
    client = _get_client(config)

    try:
        batch = client.get_batch(uid)
    except BatchNotFoundError as exc:
        raise click.ClickException(f"Batch {uid} not found") from exc
    except MeilisearchClientError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(batch.model_dump_json(by_alias=True, indent=2))
        return
    _print_batch(batch)


@click.command()
def health() -> None:
    """Check that the server is reachable and available."""
    config = _get_config()
    configure_logging(config.log_level)
    client = _get_client(config)

    if client.is_healthy():
        click.echo(f"[SUCCESS] {config.meilisearch_url} is available")
        return
    click.echo(f"[ERROR] {config.meilisearch_url} is not available")
    raise SystemExit(1)
