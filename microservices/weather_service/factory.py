"""
Weather Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that builds the outbound HTTP client and upstream clients.

Usage:
    from .factory import create_weather_service
    service = create_weather_service(settings, tracing)
"""
from typing import Optional

import httpx

from core.config import AppConfig, get_settings
from core.tracing import OtelTracing, TracingProtocol

from .clients import ViaCEPClient, WeatherAPIClient
from .weather_service import WeatherService


def _build_weather_service(
    http_client,
    tracing: TracingProtocol,
    settings: AppConfig,
    owns_http_client: bool,
) -> WeatherService:
    services = settings.services

    postal_client = ViaCEPClient(
        http_client=http_client,
        url_template=services.viacep_url,
        tracing=tracing,
    )
    weather_client = WeatherAPIClient(
        http_client=http_client,
        base_url=services.weatherapi_url,
        api_key=services.weatherapi_key,
        tracing=tracing,
    )

    return WeatherService(
        postal_client=postal_client,
        weather_client=weather_client,
        http_client=http_client if owns_http_client else None,
    )


def create_weather_service(
    settings: Optional[AppConfig] = None,
    tracing: Optional[TracingProtocol] = None,
) -> WeatherService:
    """
    Create WeatherService with real dependencies.

    One httpx.AsyncClient is shared by both upstream clients and across
    concurrent requests; WeatherService.close() releases it.

    Args:
        settings: Application settings (defaults to the global settings)
        tracing: Tracing capability (defaults to OtelTracing("weather_service"))

    Returns:
        Configured WeatherService instance
    """
    settings = settings or get_settings()
    tracing = tracing or OtelTracing("weather_service")
    http_client = httpx.AsyncClient(timeout=settings.services.http_timeout)

    return _build_weather_service(http_client, tracing, settings, owns_http_client=True)


def create_weather_service_for_testing(
    mock_http_client,
    mock_tracing: TracingProtocol,
    settings: Optional[AppConfig] = None,
) -> WeatherService:
    """
    Create WeatherService with mock dependencies for testing.

    Args:
        mock_http_client: Stand-in for httpx.AsyncClient
        mock_tracing: Tracing capability that records spans
        settings: Application settings (defaults to AppConfig())

    Returns:
        WeatherService wired with ViaCEPClient and WeatherAPIClient
    """
    return _build_weather_service(
        mock_http_client,
        mock_tracing,
        settings or AppConfig(),
        owns_http_client=False,
    )
