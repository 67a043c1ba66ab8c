"""Shared record builders for tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from cachequery.models import ObjectMeta, Record

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def hours(n: int) -> datetime:
    return T0 + timedelta(hours=n)


def make_record(
    name: str,
    namespace: str = "default",
    labels: dict | None = None,
    annotations: dict | None = None,
    created: datetime | None = None,
    kind: str = "Role",
    **extra,
) -> Record:
    """Build a Record with just enough metadata for a test."""
    return Record(
        kind=kind,
        api_version="rbac.authorization.k8s.io/v1",
        metadata=ObjectMeta(
            name=name,
            namespace=namespace,
            labels=labels or {},
            annotations=annotations or {},
            creation_timestamp=created,
        ),
        **extra,
    )


def names(records) -> list[str]:
    return [r.name for r in records]
