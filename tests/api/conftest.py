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
    from main import app
    from services.preprocess_service import PreprocessService

    settings = Settings()

    # Set in app state (lifespan is not run without a context manager)
    app.state.settings = settings
    app.state.preprocess_service = PreprocessService(params=settings.boundary)

    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    del app.state.preprocess_service
    del app.state.settings
