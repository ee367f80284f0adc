#!/usr/bin/env python3
"""Configuration for the CEP weather services

Configuration hierarchy:
- logging_config: Logging configuration
- service_config: Upstream APIs (ViaCEP, WeatherAPI) and peer service endpoints
- app_config: Combined settings used by zipcode_service and weather_service
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .service_config import ServiceConfig
from .app_config import AppConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = AppConfig.from_env()

def get_settings() -> AppConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> AppConfig:
    """Reload settings from environment"""
    global settings
    settings = AppConfig.from_env()
    return settings

__all__ = [
    'AppConfig',
    'get_settings',
    'reload_settings',
    'settings',
    'LoggingConfig',
    'ServiceConfig',
]
