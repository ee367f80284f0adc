"""
Zipcode Service Models

网关服务数据模型
"""

from dataclasses import dataclass
from pydantic import BaseModel


@dataclass(frozen=True)
class RelayedResponse:
    """weather_service reply, passed back to the client unchanged"""
    status_code: int
    body: bytes


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    service: str
    version: str


__all__ = [
    "RelayedResponse",
    "HealthResponse",
]
