"""
Test package for cex-api-kit.

Provides testing infrastructure, fixtures and mock transaction sources for
validating the API client and transaction history streams.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Test data fixtures
    "integration",  # Integration test suite
    "mocks",  # Mock objects and utilities
    "property",  # Property-based test suite
    "unit",  # Unit test suite
]
