"""Adapters for core API kinds."""

from __future__ import annotations

from ..models import Record
from .base import ResourceAdapter


class ConfigMapAdapter(ResourceAdapter[Record]):
    """ConfigMap: no kind-specific keys, only the shared reserved ones."""

    kind = "ConfigMap"
    plural = "configmaps"
    namespaced = True


__all__ = ["ConfigMapAdapter"]
