"""
Weather Service - Main Application

CEP -> city -> current temperature, exposed as POST /getWeather.
"""

from fastapi import FastAPI, HTTPException, Request
from contextlib import asynccontextmanager
from typing import Optional
import sys
import os

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from core.cep import ClientInputError, parse_cep_request
from core.config import get_settings
from core.disconnect import ClientDisconnectedError, cancel_on_disconnect
from core.logger import setup_service_logger
from core.tracing import OtelTracing, TracingProtocol
from .factory import create_weather_service
from .models import HealthResponse, WeatherResponse
from .protocols import CityNotFoundError, WeatherLookupError
from .weather_service import WeatherService

SERVICE_NAME = "weather_service"
SERVICE_VERSION = "1.0.0"

# Initialize config
settings = get_settings()

# Setup logger
logger = setup_service_logger(SERVICE_NAME, level=settings.logging.log_level)


# Service instance
class WeatherMicroservice:
    def __init__(self):
        self.service: Optional[WeatherService] = None
        self.tracing: TracingProtocol = OtelTracing(SERVICE_NAME)

    async def initialize(self):
        if not settings.services.weatherapi_key:
            logger.warning("⚠️  WEATHERAPI_KEY is not set; WeatherAPI will reject lookups")

        self.service = create_weather_service(settings=settings, tracing=self.tracing)
        logger.info(f"Weather service initialized (port {settings.services.weather_service_port})")

    async def shutdown(self):
        if self.service:
            await self.service.close()
        logger.info("Weather service shutting down")


# Global instance
microservice = WeatherMicroservice()


# Lifespan management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # Startup
    await microservice.initialize()

    yield

    # Shutdown
    await microservice.shutdown()


# Create FastAPI application
app = FastAPI(
    title="Weather Service",
    description="Resolves a Brazilian CEP to its city and reports the current temperature",
    version=SERVICE_VERSION,
    lifespan=lifespan
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """健康检查"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION
    }


# =============================================================================
# Weather Endpoint
# =============================================================================

@app.post("/getWeather", response_model=WeatherResponse)
async def get_weather(request: Request):
    """
    Get current weather for a CEP

    Body: {"cep": "01310100"}

    - **400**: body is not {"cep": string}
    - **422**: CEP is not 8 digits
    - **404**: CEP does not resolve to a city
    - **500**: weather lookup failed
    - **499**: client disconnected; upstream calls were cancelled
    """
    with microservice.tracing.span("get_weather_request", carrier=request.headers):
        try:
            cep_request = parse_cep_request(await request.body())
            return await cancel_on_disconnect(
                request,
                microservice.service.get_weather_by_cep(cep_request.cep)
            )

        except ClientInputError as e:
            logger.info(f"Rejected request: {e}")
            raise HTTPException(status_code=e.status_code, detail=e.detail)
        except ClientDisconnectedError as e:
            raise HTTPException(status_code=e.status_code, detail=e.detail)
        except CityNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except WeatherLookupError as e:
            logger.error(f"Failed to get weather data: {e}")
            raise HTTPException(status_code=500, detail="Failed to get weather data")
        except Exception as e:
            logger.error(f"Error getting weather: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "microservices.weather_service.main:app",
        host=settings.default_host,
        port=settings.services.weather_service_port,
    )
