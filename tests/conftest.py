"""
Pytest configuration and shared fixtures for cex-api-kit tests.
"""

from typing import Any
from unittest.mock import Mock

import pytest

from cex_api_kit.config import ClientConfig
from cex_api_kit.core.api_client import CexAPIClient

from .fixtures.transaction_data import make_transaction, mixed_order_records
from .mocks.api_mocks import SimulatedHistorySource


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (client and streams together)"
    )
    config.addinivalue_line("markers", "property: mark test as property-based test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# Configuration fixtures
@pytest.fixture
def test_config() -> ClientConfig:
    """Client configuration with dummy credentials."""
    return ClientConfig(
        username="up123456",
        api_key="test_api_key",
        api_secret="test_api_secret",
        base_url="https://cex.example",
    )


# Transaction fixtures
@pytest.fixture
def sample_transactions() -> list[dict[str, Any]]:
    """Twenty-five buy transactions with ids 101..125."""
    return [make_transaction(tx_id, "buy", order="900") for tx_id in range(101, 126)]


@pytest.fixture
def mixed_orders() -> list[dict[str, Any]]:
    """Interleaved trade transactions for orders "100" and "200"."""
    return mixed_order_records()


@pytest.fixture
def history_source(sample_transactions) -> SimulatedHistorySource:
    """Simulated history endpoint over the sample transactions."""
    return SimulatedHistorySource(sample_transactions)


# Mock HTTP fixtures
@pytest.fixture
def mock_session() -> Mock:
    """Mock requests session returning an empty JSON object."""
    session = Mock()
    session.headers = {}
    response = Mock()
    response.json.return_value = {}
    response.raise_for_status.return_value = None
    session.post.return_value = response
    return session


@pytest.fixture
def api_client(test_config, mock_session) -> CexAPIClient:
    """API client wired to the mock session."""
    return CexAPIClient(test_config, session=mock_session)
