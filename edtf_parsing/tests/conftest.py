"""Pytest configuration for EDTF tests."""

import os

import pytest

# Defaults for the HTTP service, set before edtf_parsing.api is imported
os.environ.setdefault("EDTF_LOG_LEVEL", "WARNING")
os.environ.setdefault("EDTF_MAX_INPUT_LENGTH", "1024")


@pytest.fixture
def test_client():
    """Provide a FastAPI TestClient for API tests."""
    from fastapi.testclient import TestClient

    from edtf_parsing.api import app

    return TestClient(app)
