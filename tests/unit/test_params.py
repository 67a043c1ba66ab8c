"""Tests for condition string and flag parsing."""

import pytest

from cachequery import params
from cachequery.models import ConditionsError
from cachequery.params import parse_conditions, parse_key_value_pairs


def test_exact_and_fuzzy_items():
    conditions = parse_conditions("name=admin|viewer,keyword~ops,app=web")
    assert conditions.match == {"name": "admin|viewer", "app": "web"}
    assert conditions.fuzzy == {"keyword": "ops"}


def test_empty_value():
    conditions = parse_conditions("app=,label~")
    assert conditions.match == {"app": ""}
    assert conditions.fuzzy == {"label": ""}


def test_last_operator_wins():
    """The key is greedy: everything up to the last '=' or '~' is the key."""
    conditions = parse_conditions("a=b=c,x~y=z")
    assert conditions.match == {"a=b": "c", "x~y": "z"}


@pytest.mark.parametrize("text", [None, ""])
def test_no_conditions(text):
    conditions = parse_conditions(text)
    assert conditions.is_empty()


def test_order_and_reverse_are_carried():
    conditions = parse_conditions("name=a", order_by="createTime", reverse=True)
    assert conditions.order_by == "createTime"
    assert conditions.reverse is True


@pytest.mark.parametrize("text", ["novalue", "name=a,", "name=a,,label~b"])
def test_invalid_items(text):
    with pytest.raises(ConditionsError):
        parse_conditions(text)


def test_conditions_error_is_value_error():
    with pytest.raises(ValueError):
        parse_conditions("bad")


def test_parse_key_value_pairs():
    assert parse_key_value_pairs(["a=1", "b=x=y", "c="]) == {
        "a": "1",
        "b": "x=y",
        "c": "",
    }
    with pytest.raises(ValueError):
        parse_key_value_pairs(["broken"])


def test_public_parsers():
    """Reverse comes from the CLI flag, so only these two parsers are exported."""
    assert params.__all__ == ["parse_conditions", "parse_key_value_pairs"]
