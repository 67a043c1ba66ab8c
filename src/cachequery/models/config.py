"""Engine configuration model (cachequery.json)."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    CREATOR_ANNOTATION_KEY,
    DISPLAY_NAME_ANNOTATION_KEY,
    WORKSPACE_LABEL_KEY,
)

LabelKeyMatch = Literal["substring", "exact"]


class EngineConfig(BaseModel):
    """Metadata keys and matching modes used by the resource adapters.

    ``label_key_match`` decides how a non-reserved fuzzy key is compared
    with label keys: ``substring`` accepts any label whose key contains
    the condition key, ``exact`` requires the label key to equal it.
    """

    model_config = ConfigDict(extra="forbid")

    display_name_annotation: str = DISPLAY_NAME_ANNOTATION_KEY
    creator_annotation: str = CREATOR_ANNOTATION_KEY
    workspace_label: str = WORKSPACE_LABEL_KEY
    label_key_match: LabelKeyMatch = "substring"
    config_path: Path | None = Field(default=None, exclude=True)


__all__ = ["EngineConfig", "LabelKeyMatch"]
