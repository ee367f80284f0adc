"""
Weather Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Protocol, runtime_checkable


# =============================================================================
# Custom Exceptions
# =============================================================================


class WeatherServiceError(Exception):
    """Base exception for weather service"""
    pass


class PostalLookupError(WeatherServiceError):
    """
    Raised when ViaCEP cannot resolve a CEP to a city.

    reason is one of:
    - "failed to fetch city": transport error or non-2xx status
    - "invalid CEP": payload carries the "erro" marker
    - "could not find city": payload has no string "localidade"
    """
    def __init__(self, cep: str, reason: str):
        self.cep = cep
        self.reason = reason
        super().__init__(f"CEP {cep}: {reason}")


class CityNotFoundError(WeatherServiceError):
    """Raised when a well-formed CEP does not resolve to a city"""
    def __init__(self, cep: str):
        self.cep = cep
        super().__init__("can not find zipcode")


class WeatherLookupError(WeatherServiceError):
    """Raised when WeatherAPI fails for a city"""
    def __init__(self, city: str, reason: str):
        self.city = city
        self.reason = reason
        super().__init__(f"Weather lookup for {city!r} failed: {reason}")


# =============================================================================
# Upstream Client Protocols
# =============================================================================


@runtime_checkable
class PostalLookupClientProtocol(Protocol):
    """
    Interface for CEP -> city lookup.

    Implementations:
    - ViaCEPClient (production)
    """

    async def get_city(self, cep: str) -> str:
        """
        Resolve a CEP to its city name.

        Args:
            cep: 8-digit CEP

        Returns:
            City name

        Raises:
            PostalLookupError: lookup failed for any reason
        """
        ...


@runtime_checkable
class WeatherLookupClientProtocol(Protocol):
    """
    Interface for city -> current temperature lookup.

    Implementations:
    - WeatherAPIClient (production)
    """

    async def get_temperature_celsius(self, city: str) -> float:
        """
        Get the current temperature for a city.

        Args:
            city: City name, free text

        Returns:
            Temperature in Celsius (0.0 when the upstream omits it)

        Raises:
            WeatherLookupError: transport error, non-2xx status or undecodable body
        """
        ...


__all__ = [
    "WeatherServiceError",
    "PostalLookupError",
    "CityNotFoundError",
    "WeatherLookupError",
    "PostalLookupClientProtocol",
    "WeatherLookupClientProtocol",
]
