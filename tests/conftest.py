"""
Shared pytest fixtures for the SauceDemo test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh collaborators for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Explicitly injected configuration and test data
- Generated negative test data with Faker
"""

import pytest
from faker import Faker

from config import Config, get_config
from shared.test_data import CredentialStore, default_credential_store


# Initialize Faker for generating test data
fake = Faker()


@pytest.fixture(scope="session")
def settings() -> Config:
    """
    Configuration for the test session.

    Selected by the E2E_ENV environment variable (local, ci, testing).
    """
    return get_config()


@pytest.fixture(scope="session")
def credential_store() -> CredentialStore:
    """Read-only SauceDemo credential store shared by every test."""
    return default_credential_store()


@pytest.fixture
def unknown_user_type(credential_store: CredentialStore) -> str:
    """A generated user type guaranteed to be absent from the store."""
    candidate = fake.unique.user_name()
    while candidate in credential_store:
        candidate = fake.unique.user_name()
    return candidate
