"""CLI entry point for the Meilisearch batches client."""

from __future__ import annotations

import click

from meilibatches.cli.commands import get_batch, health, list_batches


@click.group()
def cli() -> None:
    """Inspect Meilisearch task batches."""


cli.add_command(list_batches)
cli.add_command(get_batch)
cli.add_command(health)
