#!/usr/bin/env python3
"""
Core Module for the CEP Weather Microservices

Shared components used by zipcode_service and weather_service.

COMPONENTS:
    - config/: Environment-driven configuration (upstream URLs, API key, logging)
    - logger.py: Per-service logger setup
    - tracing.py: OpenTelemetry-backed tracing capability
    - cep.py: CEP request model, format check and client input errors

USAGE:
    from core.config import get_settings
    from core.cep import parse_cep_request

    settings = get_settings()
    request = parse_cep_request(b'{"cep": "01310100"}')
"""

__version__ = "1.0.0"
