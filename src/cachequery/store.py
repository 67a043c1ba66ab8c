"""In-memory record store: the read side the searcher lists from.

A ``MemoryStore`` holds one kind of record keyed by (namespace, name) and
answers ``get``/``list`` from a consistent snapshot. A ``Snapshot`` groups
one store per kind, the way a shared informer factory hands out listers.
"""

from __future__ import annotations

import json
import logging
import sys
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from .models import LabelSelector, NotFoundError, Record, RetrievalError

logger = logging.getLogger(__name__)


class Lister(Protocol):
    """Read API the searcher depends on."""

    def get(self, scope: str, name: str) -> Record: ...

    def list(
        self, scope: str, selector: Optional[LabelSelector] = None
    ) -> List[Record]: ...


class MemoryStore:
    """Thread-safe store for records of a single kind.

    ``list`` copies the matching records out under the lock, so callers
    filter and sort without holding it. Until the store has synced (first
    ``replace`` or explicit ``mark_synced``) reads raise ``RetrievalError``.
    """

    def __init__(self, kind: str, synced: bool = False):
        self.kind = kind
        self._lock = threading.RLock()
        self._items: Dict[Tuple[str, str], Record] = {}
        self._synced = synced

    @property
    def has_synced(self) -> bool:
        return self._synced

    def mark_synced(self) -> None:
        with self._lock:
            self._synced = True

    def replace(self, records: Iterable[Record]) -> None:
        """Swap the whole content for ``records`` and mark the store synced."""
        items = {(r.namespace, r.name): r for r in records}
        with self._lock:
            self._items = items
            self._synced = True
        logger.debug("store %s replaced with %d records", self.kind, len(items))

    def upsert(self, record: Record) -> None:
        with self._lock:
            self._items[(record.namespace, record.name)] = record

    def delete(self, scope: str, name: str) -> None:
        with self._lock:
            if self._items.pop((scope, name), None) is None:
                raise NotFoundError(self.kind, scope, name)

    def get(self, scope: str, name: str) -> Record:
        with self._lock:
            self._check_synced()
            record = self._items.get((scope, name))
        if record is None:
            raise NotFoundError(self.kind, scope, name)
        return record

    def list(
        self, scope: str, selector: Optional[LabelSelector] = None
    ) -> List[Record]:
        """Records in ``scope`` (all namespaces when empty) matching ``selector``."""
        with self._lock:
            self._check_synced()
            records = [
                r for r in self._items.values() if not scope or r.namespace == scope
            ]
        if selector is not None and not selector.empty():
            records = [r for r in records if selector.matches(r.metadata.labels)]
        return records

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _check_synced(self) -> None:
        if not self._synced:
            raise RetrievalError(f"cache for {self.kind} has not synced")


class Snapshot:
    """One ``MemoryStore`` per kind."""

    def __init__(self):
        self._lock = threading.Lock()
        self._stores: Dict[str, MemoryStore] = {}
        self._synced = False

    def lister(self, kind: str) -> MemoryStore:
        with self._lock:
            store = self._stores.get(kind)
            if store is None:
                store = MemoryStore(kind, synced=self._synced)
                self._stores[kind] = store
            return store

    def kinds(self) -> List[str]:
        with self._lock:
            return sorted(self._stores)

    def add(self, records: Iterable[Record]) -> int:
        """Upsert records into the store of their kind. Returns the count."""
        count = 0
        for record in records:
            if not record.kind:
                raise ValueError(f"record {record.name!r} has no kind")
            self.lister(record.kind).upsert(record)
            count += 1
        return count

    def mark_synced(self) -> None:
        with self._lock:
            self._synced = True
            stores = list(self._stores.values())
        for store in stores:
            store.mark_synced()

    @classmethod
    def from_files(
        cls, paths: Iterable[str | Path], default_kind: str = ""
    ) -> "Snapshot":
        """Load records from JSON/NDJSON files and mark the snapshot synced.

        Records without a kind get ``default_kind``.
        """
        snapshot = cls()
        for path in paths:
            count = snapshot.add(load_records(path, default_kind))
            logger.debug("loaded %d records from %s", count, path)
        snapshot.mark_synced()
        return snapshot


def _items_from_document(doc: Any) -> List[Dict[str, Any]]:
    if isinstance(doc, list):
        return doc
    if isinstance(doc, dict) and isinstance(doc.get("items"), list):
        # RoleList, ConfigMapList, ...: items may omit their kind
        list_kind = doc.get("kind", "")
        item_kind = list_kind[: -len("List")] if list_kind.endswith("List") else ""
        items = []
        for item in doc["items"]:
            if item_kind and isinstance(item, dict) and not item.get("kind"):
                item = {**item, "kind": item_kind}
            items.append(item)
        return items
    return [doc]


def parse_records(text: str, default_kind: str = "") -> List[Record]:
    """Parse a JSON document or NDJSON stream into records.

    Accepts a single object, an array of objects, a ``*List`` object with
    ``items``, or one object per line. Objects that carry no kind, either
    themselves or through their ``*List``, get ``default_kind``.
    """
    stripped = text.strip()
    if not stripped:
        return []
    try:
        docs = _items_from_document(json.loads(stripped))
    except json.JSONDecodeError:
        docs = []
        for line in stripped.splitlines():
            if line.strip():
                docs.extend(_items_from_document(json.loads(line)))
    if default_kind:
        docs = [
            {**doc, "kind": default_kind}
            if isinstance(doc, dict) and not doc.get("kind")
            else doc
            for doc in docs
        ]
    return [Record.model_validate(doc) for doc in docs]


def load_records(path: str | Path, default_kind: str = "") -> List[Record]:
    """Load records from a file, or from stdin when ``path`` is ``-``."""
    if str(path) == "-":
        return parse_records(sys.stdin.read(), default_kind)
    return parse_records(Path(path).read_text(encoding="utf-8"), default_kind)


__all__ = [
    "Lister",
    "MemoryStore",
    "Snapshot",
    "load_records",
    "parse_records",
]
