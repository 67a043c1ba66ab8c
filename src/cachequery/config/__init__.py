"""Config layer facade: cached engine config."""

from cachequery.models import EngineConfig

from .core import config_path, ensure, require, reset, use

__all__ = [
    "EngineConfig",
    "config_path",
    "ensure",
    "require",
    "reset",
    "use",
]
