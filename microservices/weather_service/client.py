"""
Weather Service Client

客户端库，供其他微服务调用天气服务
"""

import httpx
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class WeatherServiceClient:
    """Weather Service HTTP客户端"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        初始化Weather Service客户端

        Args:
            base_url: Weather服务的基础URL
            timeout: 请求超时时间（秒）
            http_client: 外部提供的HTTP客户端（测试用）
        """
        self.base_url = base_url.rstrip('/')
        self.client = http_client or httpx.AsyncClient(timeout=timeout)

    async def close(self):
        """关闭HTTP客户端"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =============================================================================
    # Weather Data
    # =============================================================================

    async def get_weather_by_cep(
        self,
        cep: str,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """
        POST {"cep": cep} to /getWeather

        The status code is not interpreted; callers decide what a 4xx/5xx means.

        Args:
            cep: 8-digit CEP
            headers: Extra headers (trace context)

        Returns:
            The raw weather_service response

        Raises:
            httpx.HTTPError: weather_service could not be reached

        Example:
            >>> async with WeatherServiceClient("http://localhost:9090") as client:
            ...     response = await client.get_weather_by_cep("01310100")
            ...     print(response.status_code, response.json())
        """
        return await self.client.post(
            f"{self.base_url}/getWeather",
            json={"cep": cep},
            headers=headers
        )

    # =============================================================================
    # Health Check
    # =============================================================================

    async def health_check(self) -> bool:
        """
        检查服务健康状态

        Returns:
            服务是否健康
        """
        try:
            response = await self.client.get(f"{self.base_url}/health")
            return response.status_code == 200
        except Exception as e:
            logger.warning(f"Weather service health check failed: {e}")
            return False


__all__ = ["WeatherServiceClient"]
