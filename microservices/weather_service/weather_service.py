"""
Weather Service - Business Logic

Resolves a CEP to a city (ViaCEP), fetches the city's current temperature
(WeatherAPI) and reports it in Celsius, Fahrenheit and Kelvin.
"""

import logging
from typing import Optional

import httpx

from .converters import celsius_to_fahrenheit, celsius_to_kelvin
from .models import WeatherResponse
from .protocols import (
    CityNotFoundError,
    PostalLookupClientProtocol,
    PostalLookupError,
    WeatherLookupClientProtocol,
)

logger = logging.getLogger(__name__)


class WeatherService:
    """CEP 天气服务业务逻辑"""

    def __init__(
        self,
        postal_client: PostalLookupClientProtocol,
        weather_client: WeatherLookupClientProtocol,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            postal_client: CEP -> city lookup
            weather_client: city -> temperature lookup
            http_client: Shared outbound client owned by this service, closed by close()
        """
        self.postal_client = postal_client
        self.weather_client = weather_client
        self.http_client = http_client

    async def close(self):
        """Close HTTP client"""
        if self.http_client is not None:
            await self.http_client.aclose()

    async def get_weather_by_cep(self, cep: str) -> WeatherResponse:
        """
        Get current temperature for the city of a validated CEP.

        The weather lookup only starts once the city is known; a failed
        postal lookup ends the request.

        Raises:
            CityNotFoundError: ViaCEP could not resolve the CEP (any reason)
            WeatherLookupError: WeatherAPI failed
        """
        try:
            city = await self.postal_client.get_city(cep)
        except PostalLookupError as e:
            logger.warning(f"Could not resolve CEP {cep}: {e.reason}")
            raise CityNotFoundError(cep) from e

        temp_c = await self.weather_client.get_temperature_celsius(city)

        return WeatherResponse(
            city=city,
            temp_c=temp_c,
            temp_f=celsius_to_fahrenheit(temp_c),
            temp_k=celsius_to_kelvin(temp_c),
        )


__all__ = ["WeatherService"]
