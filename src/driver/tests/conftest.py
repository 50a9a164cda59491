# ABOUTME: pytest configuration for driver settings tests
# ABOUTME: Configures marker timeouts, configuration isolation and shared settings fixtures

import os

import pytest

from driver.common import derive
from driver.config.settings import get_settings
from driver.models import Credentials, ReadPreference, WriteConcern
from driver.settings import DatabaseSettings, ServerSettings


def pytest_configure(config):
    """Configure pytest for driver tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "benchmark: Benchmark tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration related tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "benchmark"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no DRIVER_ environment variables, outside any .env file, and a cold settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("DRIVER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def admin_credentials() -> Credentials:
    return Credentials(username="root(admin)", password="s3cret")


@pytest.fixture
def server_settings(admin_credentials) -> ServerSettings:
    """Fully populated, unfrozen root settings."""
    return ServerSettings(
        default_credentials=admin_credentials,
        guid_representation="standard",
        read_preference=ReadPreference.PRIMARY,
        write_concern=WriteConcern.ACKNOWLEDGED,
        assign_id_on_insert=True,
    )


@pytest.fixture
def database_settings(server_settings) -> DatabaseSettings:
    """Frozen database settings resolved against `server_settings`."""
    return derive(DatabaseSettings(read_preference="secondary"), server_settings)
