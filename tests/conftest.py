"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from tests.fixtures.fake_client import FakeRemoteClient


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_ynab_transaction() -> dict[str, Any]:
    """Sample YNAB transaction in API shape."""
    return {
        "id": "test-transaction-123",
        "date": "2024-08-15",
        "amount": -45990,  # -$45.99 in milliunits
        "memo": "Test transaction",
        "account_id": "acct-1",
        "payee_name": "Generic Grocery Store",
        "account_name": "Test Checking",
        "category_name": "Groceries",
        "cleared": "cleared",
        "approved": True,
    }


@pytest.fixture
def fake_client() -> FakeRemoteClient:
    """In-memory remote client that records every call."""
    return FakeRemoteClient()


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    # Ensure tests don't use real data or tokens
    monkeypatch.setenv("LABELER_ENV", "test")
    monkeypatch.setenv("LABELER_DATA_DIR", str(tmp_path / "labeler_data"))
    monkeypatch.setenv("YNAB_API_TOKEN", "test-token")
    monkeypatch.setenv("YNAB_RATE_LIMIT_DELAY", "0")
    monkeypatch.delenv("YNAB_BUDGET_ID", raising=False)
    monkeypatch.delenv("YNAB_ACCOUNT_ID", raising=False)
    monkeypatch.setattr("labeler.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "labels: Tests for label loading")
    config.addinivalue_line("markers", "matching: Tests for label to transaction matching")
    config.addinivalue_line("markers", "sync: Tests for the sync and undo engine")
    config.addinivalue_line("markers", "ynab: Tests for YNAB integration")
    config.addinivalue_line("markers", "e2e: End-to-end CLI tests")
