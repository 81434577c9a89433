"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from config import Settings
    from main import app, init_app_state

    test_settings = Settings()
    test_settings.image.max_upload_mb = 1
    test_settings.metrics.default_scope = "test"

    init_app_state(app, test_settings)

    # Create test client (no context manager to avoid running lifespan)
    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    app.state.metrics.clear()
