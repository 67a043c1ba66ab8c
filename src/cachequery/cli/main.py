"""cachequery CLI main entry point with global options."""

import click

from .. import config
from ..context import CQContext, configure_logging


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    help="Engine config file (overrides $CACHEQUERY_CONFIG)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, config_file, verbose):
    """cachequery - filter, fuzzy-match and order cached records."""
    ctx.ensure_object(CQContext)
    configure_logging(verbose)

    ctx.obj.verbose = verbose
    ctx.obj.config = config.use(config_file)


# Register commands at module level so tests can import cli with commands attached
from .commands.get import get
from .commands.kinds import kinds
from .commands.search import search

cli.add_command(search)
cli.add_command(get)
cli.add_command(kinds)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
