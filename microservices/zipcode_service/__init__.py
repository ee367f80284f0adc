"""
Zipcode Service Microservice

CEP 网关服务 - validates the CEP and forwards it to weather_service
"""

from .zipcode_service import ZipcodeService
from .models import RelayedResponse

__version__ = "1.0.0"
__all__ = [
    "ZipcodeService",
    "RelayedResponse",
]
