"""Request parameter parsing: condition strings and CLI key=value flags."""

import re
from typing import Dict, Iterable, Optional

from .models import Conditions, ConditionsError

# key=value → exact, key~value → fuzzy. The key is greedy, so the last
# '=' or '~' in an item is the operator.
_CONDITION_RE = re.compile(r"(\S+)([=~])(\S+)?")


def parse_conditions(
    text: Optional[str], order_by: str = "", reverse: bool = False
) -> Conditions:
    """Parse a ``conditions`` string into a Conditions model.

    Supports:
    - key=value → exact match
    - key~value → fuzzy match
    - key= / key~ → empty value

    Args:
        text: Comma separated items, e.g. "name=a|b,label~web"
        order_by: Order-by field to carry in the result
        reverse: Reverse flag to carry in the result

    Returns:
        Conditions with match and fuzzy maps filled in

    Raises:
        ConditionsError: If an item has no operator

    Examples:
        >>> parse_conditions("name=admin|viewer,keyword~ops").match
        {'name': 'admin|viewer'}
    """
    match: Dict[str, str] = {}
    fuzzy: Dict[str, str] = {}

    if not text:
        return Conditions(order_by=order_by, reverse=reverse)

    for item in text.split(","):
        groups = _CONDITION_RE.search(item)
        if groups is None:
            raise ConditionsError(f"invalid conditions: {item!r}")
        key, operator, value = groups.group(1), groups.group(2), groups.group(3)
        if operator == "=":
            match[key] = value or ""
        else:
            fuzzy[key] = value or ""

    return Conditions(match=match, fuzzy=fuzzy, order_by=order_by, reverse=reverse)


def parse_key_value_pairs(items: Iterable[str]) -> Dict[str, str]:
    """Parse "key=value" pairs from CLI flags into a dictionary."""

    result: Dict[str, str] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"Invalid format: {item} (expected key=value)")
        key, value = item.split("=", 1)
        result[key] = value
    return result


__all__ = ["parse_conditions", "parse_key_value_pairs"]
