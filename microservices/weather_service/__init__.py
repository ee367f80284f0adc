"""
Weather Service Microservice

CEP 天气服务 - resolves a CEP to its city and reports the current temperature
"""

from .client import WeatherServiceClient
from .weather_service import WeatherService
from .models import WeatherResponse

__version__ = "1.0.0"
__all__ = [
    "WeatherServiceClient",
    "WeatherService",
    "WeatherResponse",
]
