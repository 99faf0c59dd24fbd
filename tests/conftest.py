"""Shared fixtures."""

import pytest

from timetoken.keys import generate_keypair


@pytest.fixture(scope="session")
def server_keys():
    """Server key pair, generated once per test session."""
    return generate_keypair()


@pytest.fixture(scope="session")
def other_keys():
    """An unrelated key pair."""
    return generate_keypair()
