"""Get command - print one record by name."""

import json
import sys

import click

from ...adapters import resolve_kind
from ...context import pass_context
from ...searcher import build_getter
from ...store import Snapshot


@click.command()
@click.argument("kind")
@click.argument("name")
@click.argument("sources", nargs=-1, required=True)
@click.option("-n", "--namespace", default="", help="Namespace of the record")
@pass_context
def get(ctx, kind, name, sources, namespace):
    """Print the KIND record called NAME from SOURCES as JSON.

    Examples:
        cachequery get role admin roles.json -n dev
        cachequery get clusterrole cluster-admin clusterroles.json
    """
    try:
        snapshot = Snapshot.from_files(sources, default_kind=resolve_kind(kind))
        getter = build_getter(snapshot, ctx.config)
        record = getter.get(kind, namespace, name)
        click.echo(json.dumps(record.to_json(), ensure_ascii=False))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
