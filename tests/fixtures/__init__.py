"""Test fixtures for Cookify."""

from tests.fixtures.mocks import MockClaudeService

__all__ = ["MockClaudeService"]
