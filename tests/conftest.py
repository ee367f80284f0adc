"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Service and route tests (mocked HTTP, recorded tracing)
    - unit/       : Unit tests (pure functions, models, config, no I/O)
    - contracts/  : Shared test data factories
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("ENVIRONMENT", "testing")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.contracts.cep_weather import CepWeatherTestDataFactory


@pytest.fixture
def factory() -> type:
    """Provide the test data factory"""
    return CepWeatherTestDataFactory
