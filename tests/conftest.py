"""Shared test fixtures.

Provides an in-memory candidat store, a FastAPI ``TestClient`` built around
it, and a mock Supabase client for the Supabase store tests.
"""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from app.db.store import InMemoryCandidatStore


@pytest.fixture()
def store() -> InMemoryCandidatStore:
    """Provide an empty in-memory store."""
    return InMemoryCandidatStore()


@pytest.fixture()
def test_client(store: InMemoryCandidatStore) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient wired to the ``store`` fixture."""
    from app.main import create_app

    with TestClient(create_app(store)) as client:
        yield client


@pytest.fixture()
def mock_supabase() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` in the store module with a chainable mock client.

    ``mock_supabase.table.return_value`` is the table mock; every query
    builder method returns it so tests only set ``execute.return_value``.
    """
    mock_client = MagicMock()
    mock_table = MagicMock()
    mock_client.table.return_value = mock_table
    for method_name in ("select", "insert", "upsert", "delete", "eq", "order", "limit"):
        getattr(mock_table, method_name).return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])

    with patch("app.db.store.get_supabase", return_value=mock_client):
        yield mock_client
