"""Shared live-site helpers for smoke and E2E test suites."""

from __future__ import annotations

import logging
import time

import pytest
import requests

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when ``url`` answers a GET with 200."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Site %s unreachable: %s", url, exc)
        return False
    return response.status_code == 200


def wait_for_site_reachable(url: str, timeout: int = 30, interval: int = 2) -> bool:
    """Poll ``url`` until it answers or ``timeout`` seconds pass."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url):
            return True
        time.sleep(interval)
    return False


def live_site_url(url: str, *, suite_name: str, timeout: int = 30) -> str:
    """
    Return ``url`` once it is reachable, or skip the calling suite.

    An unreachable site skips the calling suite instead of failing it.
    """
    if not wait_for_site_reachable(url, timeout=timeout):
        pytest.skip(f"{url} is not reachable; skipping {suite_name} tests")
    logger.info("Running %s tests against %s", suite_name, url)
    return url
