"""Query engine: list candidates, filter by conditions, order the result."""

from __future__ import annotations

import logging
from typing import (
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    TypeVar,
)

from .adapters import BUILTIN_ADAPTERS, ResourceAdapter
from .models import (
    Conditions,
    EngineConfig,
    LabelSelector,
    Record,
    ResourceNotSupportedError,
)
from .store import Lister, Snapshot

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


class _OrderKey:
    """Sort key that defers to a ``less(a, b)`` relation."""

    __slots__ = ("record", "less")

    def __init__(self, record, less: Callable[[object, object], bool]):
        self.record = record
        self.less = less

    def __lt__(self, other: "_OrderKey") -> bool:
        return self.less(self.record, other.record)


class Searcher(Generic[T]):
    """Answers get/search queries for one resource kind.

    Args:
        adapter: Field extraction and predicates for the kind
        lister: Store the candidates are read from
    """

    def __init__(self, adapter: ResourceAdapter[T], lister: Lister):
        self.adapter = adapter
        self.lister = lister

    @property
    def kind(self) -> str:
        return self.adapter.kind

    def get(self, scope: str, name: str) -> T:
        """Fetch one record; store errors propagate unchanged."""
        return self.lister.get(scope, name)

    def search(
        self,
        scope: str,
        conditions: Optional[Conditions] = None,
        order_by: Optional[str] = None,
        reverse: Optional[bool] = None,
    ) -> List[T]:
        """List records in ``scope`` that satisfy ``conditions``, ordered.

        Args:
            scope: Namespace to list; empty lists every namespace
            conditions: Exact and fuzzy conditions (none means select all)
            order_by: Field to order by; defaults to ``conditions.order_by``
            reverse: Invert the order; defaults to ``conditions.reverse``

        Returns:
            A new list of records. Store errors propagate unchanged.
        """
        conditions = conditions or Conditions()
        if order_by is None:
            order_by = conditions.order_by
        if reverse is None:
            reverse = conditions.reverse

        records = self.lister.list(scope, LabelSelector.everything())

        if conditions.is_empty():
            result = list(records)
        else:
            result = [
                item
                for item in records
                if self.adapter.matches(conditions, item)
                and self.adapter.fuzzy_matches(conditions, item)
            ]

        adapter = self.adapter
        if reverse:

            def less(a, b):
                return adapter.less(b, a, order_by)

        else:

            def less(a, b):
                return adapter.less(a, b, order_by)

        result.sort(key=lambda item: _OrderKey(item, less))

        logger.debug(
            "search %s scope=%r: %d of %d records (order_by=%r reverse=%s)",
            self.kind,
            scope,
            len(result),
            len(records),
            order_by,
            reverse,
        )
        return result


class ResourceGetter:
    """Dispatches queries to the searcher registered for a kind.

    Kinds are looked up case-insensitively by kind name or plural
    (``Role``, ``role``, ``roles``).
    """

    def __init__(self, searchers: Iterable[Searcher]):
        self._searchers: List[Searcher] = list(searchers)
        self._index: Dict[str, Searcher] = {}
        for searcher in self._searchers:
            adapter = searcher.adapter
            for alias in (adapter.kind, adapter.plural):
                if alias:
                    self._index[alias.lower()] = searcher

    def kinds(self) -> List[str]:
        return [s.kind for s in self._searchers]

    def searcher(self, kind: str) -> Searcher:
        searcher = self._index.get(kind.lower())
        if searcher is None:
            raise ResourceNotSupportedError(kind)
        return searcher

    def get(self, kind: str, scope: str, name: str) -> Record:
        searcher = self.searcher(kind)
        return searcher.get(_scope_for(searcher, scope), name)

    def search(
        self,
        kind: str,
        scope: str,
        conditions: Optional[Conditions] = None,
        order_by: Optional[str] = None,
        reverse: Optional[bool] = None,
    ) -> List[Record]:
        searcher = self.searcher(kind)
        return searcher.search(
            _scope_for(searcher, scope), conditions, order_by, reverse
        )


def _scope_for(searcher: Searcher, scope: str) -> str:
    # Cluster-scoped kinds live outside any namespace.
    return scope if searcher.adapter.namespaced else ""


def build_getter(
    snapshot: Snapshot,
    config: Optional[EngineConfig] = None,
    adapters: Optional[Mapping[str, ResourceAdapter]] = None,
) -> ResourceGetter:
    """Wire one searcher per adapter against ``snapshot``.

    Args:
        snapshot: Stores to list from
        config: Engine config handed to the built-in adapters
        adapters: Override the built-in adapters (keyed by kind)
    """
    if adapters is None:
        adapters = {cls.kind: cls(config) for cls in BUILTIN_ADAPTERS}
    return ResourceGetter(
        Searcher(adapter, snapshot.lister(kind)) for kind, adapter in adapters.items()
    )


__all__ = ["ResourceGetter", "Searcher", "build_getter"]
