"""cachequery: filter, fuzzy-match and order cached Kubernetes-style records."""

from . import config
from .models import Conditions, EngineConfig, Record
from .searcher import ResourceGetter, Searcher, build_getter

__all__ = [
    "Conditions",
    "EngineConfig",
    "Record",
    "ResourceGetter",
    "Searcher",
    "__version__",
    "build_getter",
    "config",
]

__version__ = "0.1.0"
