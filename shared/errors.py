"""Exceptions raised by page objects and login scenarios.

Every failure carries a ``context`` dict with debugging details. The
scenario runner attaches the scenario name and user type before the
error propagates to pytest.
"""

from __future__ import annotations

from typing import Any


class ScenarioError(Exception):
    """Base class for failures reported by a login scenario.

    Attributes:
        context: Error details such as expected/observed values or timeouts.
        scenario: Name of the scenario that failed, once attached.
        user_type: User type the scenario was exercising, once attached.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}
        self.scenario: str | None = None
        self.user_type: str | None = None

    def attach(self, scenario: str, user_type: str) -> "ScenarioError":
        """Record which scenario and user type produced this error."""
        self.scenario = scenario
        self.user_type = user_type
        return self

    def __str__(self) -> str:
        message = super().__str__()
        if self.scenario is None:
            return message
        return f"[{self.scenario} / {self.user_type}] {message}"


class UnknownUserTypeError(ScenarioError):
    """Raised when a user type has no record in the credential store."""


class AssertionMismatchError(ScenarioError):
    """Raised when the observed page state differs from the expected outcome."""

    def __init__(self, message: str, expected: Any, observed: Any):
        super().__init__(message, {"expected": expected, "observed": observed})
        self.expected = expected
        self.observed = observed


class ScenarioTimeoutError(ScenarioError):
    """Raised when a browser wait exceeds its bound."""

    def __init__(self, operation: str, timeout_ms: int | float | None):
        super().__init__(
            f"{operation} did not complete within {timeout_ms} ms",
            {"operation": operation, "timeout_ms": timeout_ms},
        )
        self.operation = operation
        self.timeout_ms = timeout_ms


class ItemIndexError(ScenarioError, IndexError):
    """Raised when an inventory item index is outside the rendered items."""

    def __init__(self, index: int, item_count: int):
        super().__init__(
            f"Item index {index} out of range for {item_count} rendered items",
            {"index": index, "item_count": item_count},
        )
        self.index = index
        self.item_count = item_count


class BrowserActionError(ScenarioError):
    """Raised when the browser rejects an action, e.g. a closed page or a failed navigation."""

    def __init__(self, operation: str, reason: str):
        super().__init__(f"{operation} failed: {reason}", {"operation": operation, "reason": reason})
        self.operation = operation
