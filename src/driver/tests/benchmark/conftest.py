# ABOUTME: Benchmark test configuration for the driver settings library
# ABOUTME: Provides pytest-benchmark setup and fixtures for performance testing

import pytest


def pytest_collection_modifyitems(config, items):
    """Add benchmark marker to all tests in benchmark directory."""
    for item in items:
        if "benchmark" in str(item.fspath):
            item.add_marker(pytest.mark.benchmark)
