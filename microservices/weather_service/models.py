"""
Weather Service Models

Resolution service response model and the upstream (ViaCEP, WeatherAPI) payloads.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Upstream Models

class ViaCEPResponse(BaseModel):
    """
    ViaCEP /ws/{cep}/json/ payload.

    Only the two fields we read are declared; either may be absent.
    "erro" is ViaCEP's not-found marker for a well-formed but unknown CEP.
    """
    model_config = ConfigDict(extra="ignore")

    erro: Optional[Any] = None
    localidade: Optional[str] = Field(None, description="City name")

    @field_validator("localidade", mode="before")
    @classmethod
    def non_string_as_missing(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    @property
    def is_not_found(self) -> bool:
        return bool(self.erro)


class WeatherAPICurrent(BaseModel):
    """WeatherAPI "current" block"""
    model_config = ConfigDict(extra="ignore")

    temp_c: Optional[float] = Field(None, description="Temperature in Celsius, None when absent or null")


class WeatherAPIResponse(BaseModel):
    """WeatherAPI /v1/current.json payload"""
    model_config = ConfigDict(extra="ignore")

    current: WeatherAPICurrent = Field(default_factory=WeatherAPICurrent)

    @field_validator("current", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


# Response Models

class WeatherResponse(BaseModel):
    """Temperature for the city a CEP resolves to, in three units"""
    model_config = ConfigDict(populate_by_name=True)

    city: str
    temp_c: float = Field(..., alias="temp_C", description="Celsius")
    temp_f: float = Field(..., alias="temp_F", description="Fahrenheit")
    temp_k: float = Field(..., alias="temp_K", description="Kelvin")


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    service: str
    version: str


__all__ = [
    "ViaCEPResponse",
    "WeatherAPICurrent",
    "WeatherAPIResponse",
    "WeatherResponse",
    "HealthResponse",
]
