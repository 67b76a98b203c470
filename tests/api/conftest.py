"""Fixtures for API tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from trackrecords.api.app import create_app
from trackrecords.api.dependencies import get_record_dao
from trackrecords.dao.record_dao import RecordDAO


def _client_for(source: Path) -> TestClient:
    app = create_app()

    def mock_get_record_dao():
        return RecordDAO(source)

    app.dependency_overrides[get_record_dao] = mock_get_record_dao
    return TestClient(app)


@pytest.fixture
def client(records_csv: Path) -> TestClient:
    """Test client reading the well-formed sample file."""
    return _client_for(records_csv)


@pytest.fixture
def messy_client(messy_csv: Path) -> TestClient:
    """Test client reading a file with malformed rows."""
    return _client_for(messy_csv)


@pytest.fixture
def client_without_source(tmp_path: Path) -> TestClient:
    """Test client whose record file does not exist."""
    return _client_for(tmp_path / "missing.csv")
