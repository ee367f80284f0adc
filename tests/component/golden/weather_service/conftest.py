"""
Weather Service Component Test Configuration

Pytest fixtures for component testing with mocked HTTP and tracing.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from microservices.weather_service.clients import ViaCEPClient, WeatherAPIClient
from microservices.weather_service.factory import create_weather_service_for_testing

from tests.component.constants import VIACEP_URL, WEATHERAPI_KEY, WEATHERAPI_URL


@pytest.fixture
def viacep_client(mock_http_client, mock_tracing):
    """ViaCEPClient over the mock HTTP client"""
    return ViaCEPClient(http_client=mock_http_client, url_template=VIACEP_URL, tracing=mock_tracing)


@pytest.fixture
def weatherapi_client(mock_http_client, mock_tracing):
    """WeatherAPIClient over the mock HTTP client"""
    return WeatherAPIClient(
        http_client=mock_http_client,
        base_url=WEATHERAPI_URL,
        api_key=WEATHERAPI_KEY,
        tracing=mock_tracing,
    )


@pytest.fixture
def weather_service(mock_http_client, mock_tracing, test_settings):
    """WeatherService wired with real clients over the mock HTTP client"""
    return create_weather_service_for_testing(
        mock_http_client=mock_http_client,
        mock_tracing=mock_tracing,
        settings=test_settings,
    )


@pytest.fixture
def client(weather_service, mock_tracing):
    """FastAPI test client; lifespan is skipped so no real httpx client is built"""
    from microservices.weather_service import main

    with patch.object(main.microservice, "service", weather_service), \
         patch.object(main.microservice, "tracing", mock_tracing):
        yield TestClient(main.app, raise_server_exceptions=False)
