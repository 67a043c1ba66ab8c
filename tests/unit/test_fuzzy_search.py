"""Tests for the fuzzy_search primitive."""

from cachequery.filtering import fuzzy_search


def test_empty_key_matches_any_value():
    labels = {"app": "nginx", "tier": "frontend"}
    assert fuzzy_search(labels, "", "front")
    assert fuzzy_search(labels, "", "gin")


def test_empty_key_ignores_keys():
    """Only values are searched when no key is given."""
    assert not fuzzy_search({"frontend": "yes"}, "", "front")


def test_key_substring_and_value_substring():
    labels = {"app.kubernetes.io/name": "nginx"}
    assert fuzzy_search(labels, "app", "ngi")
    assert fuzzy_search(labels, "kubernetes.io", "nginx")
    assert not fuzzy_search(labels, "app", "redis")
    assert not fuzzy_search(labels, "team", "nginx")


def test_key_and_value_must_hold_on_same_entry():
    labels = {"app": "web", "team": "nginx"}
    assert not fuzzy_search(labels, "app", "nginx")


def test_exact_key_mode():
    labels = {"app.kubernetes.io/name": "nginx", "app": "web"}
    assert not fuzzy_search(labels, "app", "nginx", "exact")
    assert fuzzy_search(labels, "app", "we", "exact")
    assert fuzzy_search(labels, "app.kubernetes.io/name", "nginx", "exact")


def test_empty_mapping():
    assert not fuzzy_search({}, "", "x")
    assert not fuzzy_search({}, "app", "")


def test_empty_value_matches_any_present_entry():
    assert fuzzy_search({"app": "web"}, "", "")
    assert fuzzy_search({"app": "web"}, "ap", "")
