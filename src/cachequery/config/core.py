"""Engine config state management."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from cachequery.home import load_json, resolve_config_path
from cachequery.models import EngineConfig

logger = logging.getLogger(__name__)


_CONFIG: EngineConfig | None = None
_CONFIG_PATH: Path | None = None


def reset() -> None:
    """Reset cached config (primarily for tests)."""

    global _CONFIG, _CONFIG_PATH
    _CONFIG = None
    _CONFIG_PATH = None


def config_path() -> Path | None:
    """Return the path of the active config, if set."""

    if _CONFIG_PATH is not None:
        return _CONFIG_PATH
    if _CONFIG is not None and _CONFIG.config_path is not None:
        return _CONFIG.config_path
    return None


def _store(config_obj: EngineConfig, path: Path) -> EngineConfig:
    config_obj.config_path = path
    global _CONFIG, _CONFIG_PATH
    _CONFIG = config_obj
    _CONFIG_PATH = path
    return config_obj


def use(path: Path | str | None = None) -> EngineConfig:
    """Load config from ``path`` (or fallback locations) and cache it.

    A config file that does not exist yields the defaults.
    """

    target: Optional[Path]
    if path is None:
        target = None
    elif isinstance(path, Path):
        target = path
    else:
        target = Path(path)

    resolved = resolve_config_path(target)
    if resolved.exists():
        config_obj = EngineConfig.model_validate(load_json(resolved))
        logger.debug("loaded engine config from %s", resolved)
    else:
        config_obj = EngineConfig()
        logger.debug("no config at %s, using defaults", resolved)
    return _store(config_obj, resolved)


def ensure(path: Path | str | None = None) -> EngineConfig:
    """Ensure a config is loaded, optionally overriding the path."""

    if path is not None:
        return use(path)
    if _CONFIG is None:
        return use(None)
    return _CONFIG


def require() -> EngineConfig:
    """Return the cached config, loading it if necessary."""

    return ensure(None)


__all__ = ["config_path", "ensure", "require", "reset", "use"]
