"""Adapters for RBAC roles."""

from __future__ import annotations

from typing import Any, Optional

from .. import constants
from ..models import EngineConfig, Record
from .base import ResourceAdapter


def match_user_facing(
    adapter: "_UserFacingAdapter", record: Any, key: str, value: str
) -> bool:
    # Only "true" filters; any other value leaves the result untouched.
    if value == constants.TRUE:
        return adapter.is_user_facing(record)
    return True


class _UserFacingAdapter(ResourceAdapter[Record]):
    def __init__(self, config: Optional[EngineConfig] = None):
        super().__init__(config)
        self.match_table[constants.USER_FACING] = match_user_facing

    def is_user_facing(self, record: Record) -> bool:
        """Subclasses must override: whether the record counts as user-facing."""
        raise NotImplementedError


class RoleAdapter(_UserFacingAdapter):
    """Namespaced Role. User-facing roles were created from the console."""

    kind = "Role"
    plural = "roles"
    namespaced = True

    def is_user_facing(self, record: Record) -> bool:
        annotations = self.extract_annotations(record)
        return annotations.get(self.config.creator_annotation, "") != ""


class ClusterRoleAdapter(_UserFacingAdapter):
    """Cluster-scoped ClusterRole.

    A cluster role is user-facing when it has a creator and does not
    belong to a workspace.
    """

    kind = "ClusterRole"
    plural = "clusterroles"
    namespaced = False

    def is_user_facing(self, record: Record) -> bool:
        annotations = self.extract_annotations(record)
        labels = self.extract_labels(record)
        return (
            annotations.get(self.config.creator_annotation, "") != ""
            and labels.get(self.config.workspace_label, "") == ""
        )


__all__ = ["ClusterRoleAdapter", "RoleAdapter", "match_user_facing"]
