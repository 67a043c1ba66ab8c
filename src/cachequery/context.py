"""cachequery context for passing state between commands."""

import logging
import sys
from typing import Optional

import click

from .models import EngineConfig


class CQContext:
    def __init__(self):
        self.config: Optional[EngineConfig] = None
        self.verbose = False


pass_context = click.make_pass_decorator(CQContext, ensure=True)

_HANDLER_NAME = "cachequery-cli"


def configure_logging(verbose: bool) -> None:
    """Send cachequery debug logs to stderr when verbose."""
    if not verbose:
        return
    logger = logging.getLogger("cachequery")
    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
