"""Shared pytest fixtures for the textrules test suite."""

import logging

import pytest

# Keep rule debug logging out of test output
logging.getLogger("textrules").setLevel(logging.WARNING)


@pytest.fixture
def client():
    """FastAPI test client for the web interface."""
    from fastapi.testclient import TestClient

    from web import app

    return TestClient(app)
