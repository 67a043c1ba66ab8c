"""Search command - filter and order records of one kind."""

import json
import sys

import click

from ...adapters import resolve_kind
from ...context import pass_context
from ...params import parse_conditions, parse_key_value_pairs
from ...searcher import build_getter
from ...store import Snapshot


@click.command()
@click.argument("kind")
@click.argument("sources", nargs=-1, required=True)
@click.option(
    "-n", "--namespace", default="", help="Namespace to search (default: all)"
)
@click.option(
    "-c",
    "--conditions",
    "conditions_text",
    default=None,
    help="Conditions string: key=value (exact), key~value (fuzzy), comma separated",
)
@click.option(
    "-m", "--match", "match_items", multiple=True, help="Exact condition key=value"
)
@click.option(
    "-f", "--fuzzy", "fuzzy_items", multiple=True, help="Fuzzy condition key=value"
)
@click.option("--order-by", default="", help="Order by field (name, createTime)")
@click.option("-r", "--reverse", is_flag=True, default=False, help="Reverse order")
@pass_context
def search(
    ctx,
    kind,
    sources,
    namespace,
    conditions_text,
    match_items,
    fuzzy_items,
    order_by,
    reverse,
):
    """Search KIND records loaded from SOURCES and print them as NDJSON.

    SOURCES are JSON or NDJSON files ("-" for stdin) holding objects,
    arrays of objects or *List objects with items.

    Examples:
        # Roles whose name is admin or viewer
        cachequery search roles roles.json -c 'name=admin|viewer'

        # User-facing roles in namespace dev, newest first
        cachequery search roles roles.json -n dev -m userfacing=true \\
            --order-by createTime --reverse

        # ConfigMaps with any label value containing "web"
        cachequery search configmaps cm.ndjson -f label=web
    """
    try:
        parsed = parse_conditions(conditions_text, order_by, reverse)
        conditions = parsed.model_copy(
            update={
                "match": {**parsed.match, **parse_key_value_pairs(match_items)},
                "fuzzy": {**parsed.fuzzy, **parse_key_value_pairs(fuzzy_items)},
            }
        )

        snapshot = Snapshot.from_files(sources, default_kind=resolve_kind(kind))
        getter = build_getter(snapshot, ctx.config)

        for record in getter.search(kind, namespace, conditions):
            click.echo(json.dumps(record.to_json(), ensure_ascii=False))

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
