"""Test data, helpers and errors shared by the unit, smoke and E2E suites."""
