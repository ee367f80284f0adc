"""
Zipcode Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Dict, Optional, Protocol, runtime_checkable


# =============================================================================
# Custom Exceptions
# =============================================================================


class ZipcodeServiceError(Exception):
    """Base exception for zipcode service"""
    pass


class ForwardingError(ZipcodeServiceError):
    """Raised when weather_service cannot be reached at all"""
    def __init__(self, cep: str, message: str):
        self.cep = cep
        super().__init__(f"Failed to contact weather service for {cep}: {message}")


# =============================================================================
# Client Protocol
# =============================================================================


@runtime_checkable
class WeatherServiceClientProtocol(Protocol):
    """
    Interface for the weather_service client.

    Implementations:
    - WeatherServiceClient (production)
    """

    async def get_weather_by_cep(self, cep: str, headers: Optional[Dict[str, str]] = None):
        """
        POST the CEP to weather_service.

        Returns:
            Response exposing status_code and content

        Raises:
            httpx.HTTPError: weather_service unreachable
        """
        ...

    async def close(self) -> None:
        ...


__all__ = [
    "ZipcodeServiceError",
    "ForwardingError",
    "WeatherServiceClientProtocol",
]
