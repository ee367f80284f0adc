"""
CEP Weather Contracts Package

Test data contracts shared by zipcode_service and weather_service tests.
"""

from .data_contract import CepWeatherTestDataFactory

__all__ = ["CepWeatherTestDataFactory"]
