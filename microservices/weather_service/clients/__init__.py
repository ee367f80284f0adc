"""
Weather Service Clients Module

HTTP clients for the external APIs weather_service depends on:
ViaCEP (CEP -> city) and WeatherAPI (city -> current temperature).
"""

from .viacep_client import ViaCEPClient
from .weatherapi_client import WeatherAPIClient

__all__ = [
    "ViaCEPClient",
    "WeatherAPIClient",
]
