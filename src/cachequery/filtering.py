"""Predicate evaluation and ordering for cached records.

Conditions are evaluated per key through dispatch tables owned by the
resource adapter:
- Reserved keys (name, keyword, label, ...) → their own evaluator
- Any other key → literal label lookup (exact) or label search (fuzzy)

Every condition in a map must hold (AND); an empty map always holds.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping

from . import constants

if TYPE_CHECKING:
    from .adapters.base import ResourceAdapter

Evaluator = Callable[["ResourceAdapter", Any, str, str], bool]
"""Signature shared by all evaluators: (adapter, record, key, value)."""

ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


def fuzzy_search(
    mapping: Mapping[str, str],
    target_key: str,
    target_value: str,
    key_match: str = "substring",
) -> bool:
    """Substring search over a label or annotation map.

    Args:
        mapping: Labels or annotations of a record
        target_key: Key filter; empty means any key
        target_value: Substring that the value must contain
        key_match: "substring" (key contains target_key) or
            "exact" (key equals target_key)

    Returns:
        True if some entry passes both the key filter and the value test

    Examples:
        >>> fuzzy_search({"app": "nginx"}, "", "gin")
        True
        >>> fuzzy_search({"app.kubernetes.io/name": "nginx"}, "app", "ngi")
        True
        >>> fuzzy_search({"app.kubernetes.io/name": "nginx"}, "app", "ngi", "exact")
        False
    """
    for key, value in mapping.items():
        if target_key:
            if key_match == "exact":
                if key != target_key:
                    continue
            elif target_key not in key:
                continue
        if target_value in value:
            return True
    return False


# Exact-match evaluators


def match_name(adapter: "ResourceAdapter", record: Any, key: str, value: str) -> bool:
    """Name is one of the ``|`` separated names."""
    names = value.split(constants.NAME_SEPARATOR)
    return adapter.extract_name(record) in names


def match_keyword(
    adapter: "ResourceAdapter", record: Any, key: str, value: str
) -> bool:
    """Value appears in the name, any label value or any annotation value."""
    return (
        value in adapter.extract_name(record)
        or fuzzy_search(adapter.extract_labels(record), "", value)
        or fuzzy_search(adapter.extract_annotations(record), "", value)
    )


def match_label(adapter: "ResourceAdapter", record: Any, key: str, value: str) -> bool:
    # label not exist or value not equal
    labels = adapter.extract_labels(record)
    return key in labels and labels[key] == value


# Fuzzy-match evaluators


def fuzzy_name(adapter: "ResourceAdapter", record: Any, key: str, value: str) -> bool:
    """Value appears in the name or the display-name annotation."""
    display_name = adapter.extract_annotations(record).get(
        adapter.config.display_name_annotation, ""
    )
    return value in adapter.extract_name(record) or value in display_name


def fuzzy_any_label(
    adapter: "ResourceAdapter", record: Any, key: str, value: str
) -> bool:
    return fuzzy_search(adapter.extract_labels(record), "", value)


def fuzzy_any_annotation(
    adapter: "ResourceAdapter", record: Any, key: str, value: str
) -> bool:
    """Search annotations, then reject the record whatever the outcome.

    Annotation conditions never select anything; a failed search and a
    successful one both end in False.
    """
    if not fuzzy_search(adapter.extract_annotations(record), "", value):
        return False
    return False


def fuzzy_label(adapter: "ResourceAdapter", record: Any, key: str, value: str) -> bool:
    return fuzzy_search(
        adapter.extract_labels(record),
        key,
        value,
        adapter.config.label_key_match,
    )


def _evaluate(
    adapter: "ResourceAdapter",
    table: Mapping[str, Evaluator],
    default: Evaluator,
    conditions: Mapping[str, str],
    record: Any,
) -> bool:
    for key, value in conditions.items():
        evaluator = table.get(key, default)
        if not evaluator(adapter, record, key, value):
            return False
    return True


def matches(
    adapter: "ResourceAdapter", match: Mapping[str, str], record: Any
) -> bool:
    """Check every exact condition against a record."""
    return _evaluate(adapter, adapter.match_table, match_label, match, record)


def fuzzy_matches(
    adapter: "ResourceAdapter", fuzzy: Mapping[str, str], record: Any
) -> bool:
    """Check every fuzzy condition against a record."""
    return _evaluate(adapter, adapter.fuzzy_table, fuzzy_label, fuzzy, record)


def compare(adapter: "ResourceAdapter", a: Any, b: Any, order_by: str) -> bool:
    """Ordering relation used for sorting: should ``a`` come before ``b``.

    - createTime: ``a`` was created strictly before ``b``
    - anything else: ``name(a) <= name(b)``

    The name branch is deliberately non-strict: equal names compare True
    in both directions.
    """
    if order_by == constants.CREATE_TIME:
        return adapter.extract_creation_time(a) < adapter.extract_creation_time(b)
    return adapter.extract_name(a) <= adapter.extract_name(b)


def default_match_table() -> Dict[str, Evaluator]:
    return {
        constants.NAME: match_name,
        constants.KEYWORD: match_keyword,
    }


def default_fuzzy_table() -> Dict[str, Evaluator]:
    return {
        constants.NAME: fuzzy_name,
        constants.LABEL: fuzzy_any_label,
        constants.ANNOTATION: fuzzy_any_annotation,
    }


__all__ = [
    "Evaluator",
    "ZERO_TIME",
    "compare",
    "default_fuzzy_table",
    "default_match_table",
    "fuzzy_any_annotation",
    "fuzzy_any_label",
    "fuzzy_label",
    "fuzzy_matches",
    "fuzzy_name",
    "fuzzy_search",
    "match_keyword",
    "match_label",
    "match_name",
    "matches",
]
