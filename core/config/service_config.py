#!/usr/bin/env python3
"""Service configuration for the CEP weather services

Upstream endpoints (ViaCEP, WeatherAPI) consumed by weather_service, and the
weather_service address consumed by zipcode_service.
"""
import os
from dataclasses import dataclass


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class ServiceConfig:
    """Upstream and peer service endpoints"""

    # ===========================================
    # External APIs
    # ===========================================
    # ViaCEP - postal code lookup, {cep} is substituted per request
    viacep_url: str = "https://viacep.com.br/ws/{cep}/json/"

    # WeatherAPI - current conditions
    weatherapi_url: str = "https://api.weatherapi.com/v1/current.json"
    weatherapi_key: str = ""

    # ===========================================
    # Peer Services
    # ===========================================
    weather_service_url: str = "http://localhost:9090"
    weather_service_port: int = 9090
    zipcode_service_port: int = 8080

    # ===========================================
    # HTTP client
    # ===========================================
    http_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> 'ServiceConfig':
        """Load service configuration from environment variables"""
        return cls(
            viacep_url=os.getenv("VIACEP_URL", "https://viacep.com.br/ws/{cep}/json/"),
            weatherapi_url=os.getenv("WEATHERAPI_URL", "https://api.weatherapi.com/v1/current.json"),
            weatherapi_key=os.getenv("WEATHERAPI_KEY", ""),
            weather_service_url=os.getenv("WEATHER_SERVICE_URL", "http://localhost:9090"),
            weather_service_port=_int(os.getenv("WEATHER_SERVICE_PORT", "9090"), 9090),
            zipcode_service_port=_int(os.getenv("ZIPCODE_SERVICE_PORT", "8080"), 8080),
            http_timeout=_float(os.getenv("HTTP_TIMEOUT", "30"), 30.0),
        )
