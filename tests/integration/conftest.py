"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_STARDOTS_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_STARDOTS_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_STARDOTS_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def space_name() -> str:
    return os.environ.get("STARDOTS_TEST_SPACE", "demo")
