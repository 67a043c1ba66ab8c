"""Query condition model."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Conditions(BaseModel):
    """Exact and fuzzy conditions for one list query.

    Keys are field identifiers. Reserved keys (see ``cachequery.constants``)
    carry their own semantics; any other key is treated as a label key.
    Both maps empty means no filtering at all.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    match: Dict[str, str] = Field(default_factory=dict)
    fuzzy: Dict[str, str] = Field(default_factory=dict)
    order_by: str = Field(default="", alias="orderBy")
    reverse: bool = False

    def is_empty(self) -> bool:
        """True when neither exact nor fuzzy conditions are set."""

        return not self.match and not self.fuzzy


__all__ = ["Conditions"]
