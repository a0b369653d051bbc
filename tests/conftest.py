"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock, patch

import pytest

from dockertest.config import settings
from dockertest.services.container import client as docker_client_module

# Modules that import is_inside_container by name
_ENVIRONMENT_CHECKS = (
    "dockertest.services.mysql.options.is_inside_container",
    "dockertest.services.mysql.health.is_inside_container",
    "dockertest.services.mysql.container.is_inside_container",
)


@pytest.fixture(autouse=True)
def on_host(request):
    """Run every test as if it was started on the docker host.

    The CI itself may run inside a container; tests that need that case use
    the ``inside_container`` fixture.
    """
    if request.node.get_closest_marker("integration"):
        yield []
        return
    patchers = [patch(target, return_value=False) for target in _ENVIRONMENT_CHECKS]
    mocks = [p.start() for p in patchers]
    yield mocks
    for p in patchers:
        p.stop()


@pytest.fixture
def inside_container(on_host):
    """Pretend the tests run inside a container."""
    for mock in on_host:
        mock.return_value = True
    yield


@pytest.fixture(autouse=True)
def clean_mysql_env(monkeypatch):
    """Remove TEST_MYSQL_* overrides a test may have set."""
    for var in (
        "TEST_MYSQL_HOST",
        "TEST_MYSQL_PORT",
        "TEST_MYSQL_DATABASE",
        "TEST_MYSQL_USERNAME",
        "TEST_MYSQL_PASSWORD",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def fast_settings(request, monkeypatch):
    """Talk to the local socket and do not sleep between readiness attempts."""
    if request.node.get_closest_marker("integration"):
        return
    monkeypatch.setattr(settings, "docker_base_url", None)
    monkeypatch.setattr(settings, "test_mysql_ready_delay", 0)


@pytest.fixture(autouse=True)
def reset_docker_client():
    """Reset the cached Docker client between tests."""
    original = docker_client_module._client
    docker_client_module._client = None
    yield
    docker_client_module._client = original


@pytest.fixture
def mock_container():
    """Mock docker-py container."""
    container = MagicMock()
    container.id = "3f4e5d6c7b8a9f0e1d2c3b4a5f6e7d8c9b0a1f2e3d4c5b6a7f8e9d0c1b2a3f4e"
    container.name = "mysql-test"
    container.wait.return_value = {"StatusCode": 0}
    container.logs.return_value = b"done\n"
    container.attrs = {
        "NetworkSettings": {
            "IPAddress": "172.17.0.5",
            "Networks": {"bridge": {"IPAddress": "172.17.0.5"}},
        }
    }
    return container


@pytest.fixture
def mock_docker_client(mock_container):
    """Mock Docker client whose containers.create returns ``mock_container``."""
    client = MagicMock()
    client.containers.create.return_value = mock_container
    client.images.get.return_value = MagicMock()
    client.ping.return_value = True
    return client


@pytest.fixture
def no_pull(monkeypatch):
    """Disable image pulling."""
    monkeypatch.setattr(settings, "docker_pull_images", False)
