"""
Zipcode Service - Main Application

Client-facing entry point: POST /weather validates the CEP and relays
weather_service's answer.
"""

from fastapi import FastAPI, HTTPException, Request, Response
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
from .factory import create_zipcode_service
from .models import HealthResponse
from .protocols import ForwardingError
from .zipcode_service import ZipcodeService

SERVICE_NAME = "zipcode_service"
SERVICE_VERSION = "1.0.0"

# Initialize config
settings = get_settings()

# Setup logger
logger = setup_service_logger(SERVICE_NAME, level=settings.logging.log_level)


# Service instance
class ZipcodeMicroservice:
    def __init__(self):
        self.service: Optional[ZipcodeService] = None
        self.tracing: TracingProtocol = OtelTracing(SERVICE_NAME)

    async def initialize(self):
        self.service = create_zipcode_service(settings=settings, tracing=self.tracing)
        logger.info(
            f"Zipcode service initialized (port {settings.services.zipcode_service_port}, "
            f"weather service at {settings.services.weather_service_url})"
        )

    async def shutdown(self):
        if self.service:
            await self.service.close()
        logger.info("Zipcode service shutting down")


# Global instance
microservice = ZipcodeMicroservice()


# Lifespan management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    await microservice.initialize()

    yield

    await microservice.shutdown()


# Create FastAPI application
app = FastAPI(
    title="Zipcode Service",
    description="Validates a Brazilian CEP and forwards it to the weather service",
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

@app.post("/weather")
async def weather(request: Request):
    """
    Get current weather for a CEP

    Body: {"cep": "01310100"}

    Status and body mirror weather_service; 400/422 are answered here without
    calling it, 500 when it cannot be reached. If the client disconnects the
    forward is cancelled.
    """
    with microservice.tracing.span("weather_request", carrier=request.headers):
        try:
            cep_request = parse_cep_request(await request.body())
            relayed = await cancel_on_disconnect(
                request,
                microservice.service.forward(cep_request.cep)
            )

        except ClientInputError as e:
            logger.info(f"Rejected request: {e}")
            raise HTTPException(status_code=e.status_code, detail=e.detail)
        except ClientDisconnectedError as e:
            raise HTTPException(status_code=e.status_code, detail=e.detail)
        except ForwardingError:
            raise HTTPException(status_code=500, detail="Failed to contact Weather App")
        except Exception as e:
            logger.error(f"Error forwarding request: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")

        return Response(
            content=relayed.body,
            status_code=relayed.status_code,
            media_type="application/json"
        )


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "microservices.zipcode_service.main:app",
        host=settings.default_host,
        port=settings.services.zipcode_service_port,
    )
