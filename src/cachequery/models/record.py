"""Cached object models."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field


class ObjectMeta(BaseModel):
    """Identity and metadata shared by every cached object."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    namespace: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)
    creation_timestamp: datetime | None = Field(
        default=None, alias="creationTimestamp"
    )


class Record(BaseModel):
    """A cached object (Role, ClusterRole, ConfigMap, ...).

    Only ``metadata`` is interpreted; everything else (``rules``, ``data``)
    is carried through untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: str = Field(default="", alias="apiVersion")
    kind: str = ""
    metadata: ObjectMeta

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def to_json(self) -> dict:
        """Dump in the camel-case wire format it was loaded from."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LabelSelector(BaseModel):
    """Equality-based label selector. Empty selects everything."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    match_labels: Dict[str, str] = Field(
        default_factory=dict, alias="matchLabels"
    )

    @classmethod
    def everything(cls) -> "LabelSelector":
        return cls()

    def empty(self) -> bool:
        return not self.match_labels

    def matches(self, labels: Mapping[str, str]) -> bool:
        return all(
            key in labels and labels[key] == value
            for key, value in self.match_labels.items()
        )


__all__ = ["LabelSelector", "ObjectMeta", "Record"]
