"""cachequery CLI layer.

Expose ``cli`` and ``main`` lazily to avoid importing ``cachequery.cli.main``
at package import time (runpy warns when executing ``python -m
cachequery.cli.main`` if the submodule is already in ``sys.modules``).
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name in {"cli", "main"}:
        from .main import cli as _cli
        from .main import main as _main

        return _cli if name == "cli" else _main
    raise AttributeError(name)
