"""
Weather Service Client - Component Golden Tests

Tests WeatherServiceClient, the library other services use to call weather_service.
"""
import httpx
import pytest

from microservices.weather_service.client import WeatherServiceClient
from tests.component.constants import WEATHER_SERVICE_URL

pytestmark = [pytest.mark.component, pytest.mark.golden, pytest.mark.asyncio]


@pytest.fixture
def service_client(mock_http_client):
    return WeatherServiceClient(base_url=f"{WEATHER_SERVICE_URL}/", http_client=mock_http_client)


class TestWeatherServiceClient:

    async def test_get_weather_by_cep_posts_body(self, service_client, mock_http_client):
        mock_http_client.set_response("POST", f"{WEATHER_SERVICE_URL}/getWeather", json_data={"city": "Manaus"})

        response = await service_client.get_weather_by_cep("69005040", headers={"traceparent": "x"})

        assert response.status_code == 200
        request = mock_http_client.get_last_request()
        assert request["json"] == {"cep": "69005040"}
        assert request["headers"] == {"traceparent": "x"}

    async def test_error_status_is_returned_not_raised(self, service_client, mock_http_client):
        mock_http_client.set_response("POST", f"{WEATHER_SERVICE_URL}/getWeather", status_code=404, json_data={"detail": "can not find zipcode"})

        response = await service_client.get_weather_by_cep("99999999")

        assert response.status_code == 404

    async def test_health_check(self, service_client, mock_http_client):
        mock_http_client.set_response("GET", f"{WEATHER_SERVICE_URL}/health", json_data={"status": "healthy"})

        assert await service_client.health_check() is True

    async def test_health_check_unreachable(self, service_client, mock_http_client):
        mock_http_client.set_error(httpx.ConnectError("refused"))

        assert await service_client.health_check() is False

    async def test_context_manager_closes_client(self, mock_http_client):
        async with WeatherServiceClient(WEATHER_SERVICE_URL, http_client=mock_http_client):
            pass

        assert mock_http_client.closed is True
