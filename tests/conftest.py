"""Pytest configuration and shared fixtures."""

import json

import pytest
from click.testing import CliRunner

from cachequery import config
from cachequery.adapters import ClusterRoleAdapter, ConfigMapAdapter, RoleAdapter
from cachequery.cli import cli
from cachequery.store import MemoryStore
from tests.helpers import hours, make_record


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config resolution at a missing file so tests see defaults.

    The cached config in cachequery.config persists across tests; clear it
    before and after each one.
    """
    monkeypatch.setenv("CACHEQUERY_CONFIG", str(tmp_path / "absent.json"))
    config.reset()
    yield
    config.reset()


@pytest.fixture
def role_adapter():
    return RoleAdapter()


@pytest.fixture
def cluster_role_adapter():
    return ClusterRoleAdapter()


@pytest.fixture
def configmap_adapter():
    return ConfigMapAdapter()


@pytest.fixture
def role_store():
    """Synced store with a few roles across two namespaces."""
    store = MemoryStore("Role")
    store.replace(
        [
            make_record(
                "viewer",
                labels={"app": "console"},
                annotations={"kubesphere.io/alias-name": "Read Only"},
                created=hours(3),
            ),
            make_record(
                "admin",
                labels={"app": "console", "tier": "gold"},
                annotations={"kubesphere.io/creator": "alice"},
                created=hours(1),
            ),
            make_record(
                "operator",
                labels={"team": "platform"},
                annotations={"description": "operates workloads"},
                created=hours(2),
            ),
            make_record("admin", namespace="dev", created=hours(4)),
        ]
    )
    return store


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Invoke the CLI with args and optional stdin input."""

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def roles_file(tmp_path):
    """A RoleList JSON file as `kubectl get roles -A -o json` would write it."""
    path = tmp_path / "roles.json"
    path.write_text(
        json.dumps(
            {
                "apiVersion": "v1",
                "kind": "RoleList",
                "items": [
                    {
                        "apiVersion": "rbac.authorization.k8s.io/v1",
                        "metadata": {
                            "name": "viewer",
                            "namespace": "dev",
                            "creationTimestamp": "2024-01-01T03:00:00Z",
                            "labels": {"app": "console"},
                        },
                        "rules": [{"verbs": ["get", "list"]}],
                    },
                    {
                        "apiVersion": "rbac.authorization.k8s.io/v1",
                        "metadata": {
                            "name": "admin",
                            "namespace": "dev",
                            "creationTimestamp": "2024-01-01T01:00:00Z",
                            "annotations": {"kubesphere.io/creator": "alice"},
                        },
                        "rules": [{"verbs": ["*"]}],
                    },
                    {
                        "apiVersion": "rbac.authorization.k8s.io/v1",
                        "metadata": {
                            "name": "editor",
                            "namespace": "prod",
                            "creationTimestamp": "2024-01-01T02:00:00Z",
                        },
                    },
                ],
            }
        )
    )
    return path
