"""Per-kind resource adapters."""

from ..models import ResourceNotSupportedError
from .base import ResourceAdapter
from .core import ConfigMapAdapter
from .rbac import ClusterRoleAdapter, RoleAdapter

BUILTIN_ADAPTERS = (RoleAdapter, ClusterRoleAdapter, ConfigMapAdapter)


def resolve_kind(name: str) -> str:
    """Canonical kind of a built-in adapter named by kind or plural."""
    for cls in BUILTIN_ADAPTERS:
        if name.lower() in (cls.kind.lower(), cls.plural.lower()):
            return cls.kind
    raise ResourceNotSupportedError(name)


__all__ = [
    "BUILTIN_ADAPTERS",
    "ClusterRoleAdapter",
    "ConfigMapAdapter",
    "ResourceAdapter",
    "RoleAdapter",
    "resolve_kind",
]
