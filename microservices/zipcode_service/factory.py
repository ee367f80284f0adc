"""
Zipcode Service Factory

Factory functions for creating service instances with real dependencies.

Usage:
    from .factory import create_zipcode_service
    service = create_zipcode_service(settings, tracing)
"""
from typing import Optional

from core.config import AppConfig, get_settings
from core.tracing import OtelTracing, TracingProtocol
from microservices.weather_service.client import WeatherServiceClient

from .zipcode_service import ZipcodeService


def create_zipcode_service(
    settings: Optional[AppConfig] = None,
    tracing: Optional[TracingProtocol] = None,
) -> ZipcodeService:
    """
    Create ZipcodeService with real dependencies.

    Args:
        settings: Application settings (defaults to the global settings)
        tracing: Tracing capability (defaults to OtelTracing("zipcode_service"))

    Returns:
        Configured ZipcodeService instance
    """
    settings = settings or get_settings()
    weather_client = WeatherServiceClient(
        base_url=settings.services.weather_service_url,
        timeout=settings.services.http_timeout,
    )
    return ZipcodeService(
        weather_client=weather_client,
        tracing=tracing or OtelTracing("zipcode_service"),
    )


def create_zipcode_service_for_testing(
    mock_http_client,
    mock_tracing: TracingProtocol,
    settings: Optional[AppConfig] = None,
) -> ZipcodeService:
    """
    Create ZipcodeService with mock dependencies for testing.

    Args:
        mock_http_client: Stand-in for httpx.AsyncClient used by WeatherServiceClient
        mock_tracing: Tracing capability that records spans
        settings: Application settings (defaults to AppConfig())

    Returns:
        ZipcodeService configured for testing
    """
    settings = settings or AppConfig()
    weather_client = WeatherServiceClient(
        base_url=settings.services.weather_service_url,
        http_client=mock_http_client,
    )
    return ZipcodeService(weather_client=weather_client, tracing=mock_tracing)
