"""Shared fixtures for integration tests."""

import os

import pytest

from tinystep import ClientConfig, TinystepClient

# Skip all integration tests unless RUN_TINYSTEP_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TINYSTEP_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_TINYSTEP_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def ca_client():
    """Client for the authority named by TINYSTEP_CA_URL (and TINYSTEP_CA_BUNDLE)."""
    if not os.environ.get("TINYSTEP_CA_URL"):
        pytest.skip("TINYSTEP_CA_URL is not set")
    with TinystepClient(ClientConfig.from_env()) as client:
        yield client
