"""Kinds command - list supported resource kinds."""

import click

from ...adapters import BUILTIN_ADAPTERS


@click.command()
def kinds():
    """List resource kinds that can be searched."""
    for adapter in BUILTIN_ADAPTERS:
        scope = "namespaced" if adapter.namespaced else "cluster"
        click.echo(f"{adapter.kind}\t{adapter.plural}\t{scope}")
