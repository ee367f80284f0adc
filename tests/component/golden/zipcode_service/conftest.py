"""
Zipcode Service Component Test Configuration

Pytest fixtures for component testing with a mocked weather_service.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from microservices.zipcode_service.factory import create_zipcode_service_for_testing


@pytest.fixture
def zipcode_service(mock_http_client, mock_tracing, test_settings):
    """ZipcodeService forwarding through the mock HTTP client"""
    return create_zipcode_service_for_testing(
        mock_http_client=mock_http_client,
        mock_tracing=mock_tracing,
        settings=test_settings,
    )


@pytest.fixture
def client(zipcode_service, mock_tracing):
    """FastAPI test client; lifespan is skipped so no real httpx client is built"""
    from microservices.zipcode_service import main

    with patch.object(main.microservice, "service", zipcode_service), \
         patch.object(main.microservice, "tracing", mock_tracing):
        yield TestClient(main.app, raise_server_exceptions=False)
