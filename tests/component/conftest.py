"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── golden/      🔒 Characterization (never modify)
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
    pytest tests/component/golden/weather_service -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from core.config import AppConfig, ServiceConfig
from tests.component.constants import VIACEP_URL, WEATHERAPI_KEY, WEATHERAPI_URL, WEATHER_SERVICE_URL
from tests.component.mocks import MockHttpClient, MockTracing


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )
    config.addinivalue_line(
        "markers", "golden: safety net tests - DO NOT MODIFY"
    )


# =============================================================================
# Settings
# =============================================================================

@pytest.fixture
def test_settings() -> AppConfig:
    """Settings pointing at fake upstream hosts"""
    return AppConfig(
        environment="testing",
        services=ServiceConfig(
            viacep_url=VIACEP_URL,
            weatherapi_url=WEATHERAPI_URL,
            weatherapi_key=WEATHERAPI_KEY,
            weather_service_url=WEATHER_SERVICE_URL,
        ),
    )


# =============================================================================
# HTTP / Tracing Mocks
# =============================================================================

@pytest.fixture
def mock_http_client() -> MockHttpClient:
    """Mock httpx.AsyncClient"""
    return MockHttpClient()


@pytest.fixture
def mock_tracing() -> MockTracing:
    """Tracing capability that records spans"""
    return MockTracing()
