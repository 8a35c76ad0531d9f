"""
Test-suite configuration module.

This module defines configuration classes for the environments the
suite runs in (local, CI, unit testing). Configuration values are
loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("SAUCE_BASE_URL", "https://www.saucedemo.com").rstrip("/")
    INVENTORY_PATH: str = os.environ.get("SAUCE_INVENTORY_PATH", "/inventory.html")

    # Playwright timeouts are in milliseconds
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("DEFAULT_TIMEOUT_MS", "5000"))
    SETTLE_TIMEOUT_MS: int = int(os.environ.get("SETTLE_TIMEOUT_MS", "30000"))
    PERFORMANCE_SETTLE_TIMEOUT_MS: int = int(
        os.environ.get("PERFORMANCE_SETTLE_TIMEOUT_MS", "60000")
    )

    # Extra latency tolerated for problem_user before the final check
    PROBLEM_DELAY_MIN_MS: int = int(os.environ.get("PROBLEM_DELAY_MIN_MS", "500"))
    PROBLEM_DELAY_MAX_MS: int = int(os.environ.get("PROBLEM_DELAY_MAX_MS", "1500"))

    SCREENSHOT_DIR: str = os.environ.get(
        "SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )

    VIEWPORT_WIDTH: int = 1280
    VIEWPORT_HEIGHT: int = 720

    @property
    def login_url(self) -> str:
        """URL of the login entry point."""
        return f"{self.BASE_URL}/"

    @property
    def inventory_url(self) -> str:
        """URL of the post-login product listing."""
        return f"{self.BASE_URL}{self.INVENTORY_PATH}"


class LocalConfig(Config):
    """Configuration for runs on a developer machine."""


class CIConfig(Config):
    """Configuration for CI runners."""

    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("DEFAULT_TIMEOUT_MS", "10000"))


class TestingConfig(Config):
    """Configuration for unit tests that never touch a real browser."""

    PROBLEM_DELAY_MIN_MS: int = 0
    PROBLEM_DELAY_MAX_MS: int = 0


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "testing": TestingConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> Config:
    """
    Get a configuration instance for the specified environment.

    Args:
        env: Environment name (local, ci, testing).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Instance of the selected configuration class.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "default")
    return config.get(env, config["default"])()
