"""Errors raised by stores, the resource getter and condition parsing."""

from __future__ import annotations


class RetrievalError(Exception):
    """The store could not produce records (e.g. cache not synced)."""

    pass


class NotFoundError(Exception):
    """No record with the requested name exists in the scope."""

    def __init__(self, kind: str, scope: str, name: str):
        self.kind = kind
        self.scope = scope
        self.name = name
        where = f" in namespace {scope!r}" if scope else ""
        super().__init__(f"{kind} {name!r} not found{where}")


class ResourceNotSupportedError(Exception):
    """No searcher is registered for the requested resource kind."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"resource kind not supported: {kind}")


class ConditionsError(ValueError):
    """A conditions string could not be parsed."""

    pass


__all__ = [
    "ConditionsError",
    "NotFoundError",
    "ResourceNotSupportedError",
    "RetrievalError",
]
