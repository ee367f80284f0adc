"""
Zipcode Service - Business Logic

Forwards a validated CEP to weather_service and relays its reply.
"""

import logging

import httpx

from core.tracing import TracingProtocol

from .models import RelayedResponse
from .protocols import ForwardingError, WeatherServiceClientProtocol

logger = logging.getLogger(__name__)


class ZipcodeService:
    """网关服务业务逻辑"""

    def __init__(self, weather_client: WeatherServiceClientProtocol, tracing: TracingProtocol):
        self.weather_client = weather_client
        self.tracing = tracing

    async def close(self):
        """Close the weather_service client"""
        await self.weather_client.close()

    async def forward(self, cep: str) -> RelayedResponse:
        """
        Forward a validated CEP to weather_service.

        Any status weather_service answers with is relayed as-is, 4xx/5xx included.

        Raises:
            ForwardingError: weather_service could not be reached
        """
        with self.tracing.span("forward_to_weather_service", cep=cep):
            try:
                response = await self.weather_client.get_weather_by_cep(
                    cep,
                    headers=self.tracing.inject({})
                )
            except httpx.HTTPError as e:
                logger.error(f"Failed to contact weather service: {e}")
                raise ForwardingError(cep, str(e)) from e

            return RelayedResponse(status_code=response.status_code, body=response.content)


__all__ = ["ZipcodeService"]
