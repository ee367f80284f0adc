"""
WeatherAPI Client

Fetches the current temperature for a city from https://www.weatherapi.com.
"""

import logging

import httpx
from pydantic import ValidationError

from core.tracing import TracingProtocol

from ..models import WeatherAPIResponse
from ..protocols import WeatherLookupError

logger = logging.getLogger(__name__)

# reported when the payload carries no usable temperature
ZERO_CELSIUS = 0.0


class WeatherAPIClient:
    """Weather lookup client (implements WeatherLookupClientProtocol)"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        api_key: str,
        tracing: TracingProtocol
    ):
        self.http_client = http_client
        self.base_url = base_url
        self.api_key = api_key
        self.tracing = tracing

    async def get_temperature_celsius(self, city: str) -> float:
        """
        Get current temperature in Celsius.

        A payload without current.temp_c yields 0.0 rather than an error;
        callers downstream rely on that.
        """
        with self.tracing.span("lookup_weather", city=city):
            # httpx percent-encodes the city into the query string
            params = {"key": self.api_key, "q": city}

            try:
                response = await self.http_client.get(
                    self.base_url,
                    params=params,
                    headers=self.tracing.inject({})
                )
            except httpx.HTTPError as e:
                raise WeatherLookupError(city, f"request failed: {e}") from e

            if not response.is_success:
                raise WeatherLookupError(city, f"failed to fetch weather data (status {response.status_code})")

            try:
                payload = WeatherAPIResponse.model_validate_json(response.content)
            except ValidationError as e:
                raise WeatherLookupError(city, f"undecodable weather payload: {e.error_count()} error(s)") from e

            temp_c = payload.current.temp_c
            if temp_c is None:
                logger.warning(f"WeatherAPI payload for {city!r} has no current.temp_c, reporting 0.0")
                return ZERO_CELSIUS

            return temp_c


__all__ = ["WeatherAPIClient"]
