"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_PLANETSTAT_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_PLANETSTAT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_PLANETSTAT_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "EDSMCache"
