"""
Smoke-test fixtures for the SauceDemo site.

Provides the ``smoke_base_url`` session-scoped fixture that yields a
reachable site URL shared across the smoke suite. Reachability is
delegated to :func:`shared.live_site.live_site_url`, which skips the
suite when the public demo site is down.
"""

from __future__ import annotations

import pytest

from config import Config
from shared.live_site import live_site_url


@pytest.fixture(scope="session")
def smoke_base_url(settings: Config) -> str:
    """Return a reachable SauceDemo base URL for smoke tests."""
    return live_site_url(settings.login_url, suite_name="smoke")
