"""Resource adapter base: field extraction and predicate dispatch tables."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Generic, Mapping, Optional, TypeVar

from .. import filtering
from ..filtering import Evaluator
from ..models import Conditions, EngineConfig, Record

T = TypeVar("T", bound=Record)


class ResourceAdapter(Generic[T]):
    """Per-kind plug-in used by the searcher.

    Subclasses set ``kind``/``namespaced`` and extend the dispatch tables
    with kind-specific reserved keys. Keys absent from a table fall back to
    label lookup.
    """

    kind: str = ""
    plural: str = ""
    namespaced: bool = True

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.match_table: Dict[str, Evaluator] = filtering.default_match_table()
        self.fuzzy_table: Dict[str, Evaluator] = filtering.default_fuzzy_table()

    def extract_name(self, record: T) -> str:
        return record.metadata.name

    def extract_labels(self, record: T) -> Mapping[str, str]:
        return record.metadata.labels

    def extract_annotations(self, record: T) -> Mapping[str, str]:
        return record.metadata.annotations

    def extract_creation_time(self, record: T) -> datetime:
        created = record.metadata.creation_timestamp
        if created is None:
            return filtering.ZERO_TIME
        if created.tzinfo is None:
            return created.replace(tzinfo=timezone.utc)
        return created

    def matches(self, conditions: Conditions, record: T) -> bool:
        return filtering.matches(self, conditions.match, record)

    def fuzzy_matches(self, conditions: Conditions, record: T) -> bool:
        return filtering.fuzzy_matches(self, conditions.fuzzy, record)

    def less(self, a: T, b: T, order_by: str) -> bool:
        return filtering.compare(self, a, b, order_by)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"


__all__ = ["ResourceAdapter"]
