#!/usr/bin/env python3
"""Main configuration

Combines the logging and service sub-configs shared by zipcode_service and
weather_service.
"""
import os
from dataclasses import dataclass, field

from .logging_config import LoggingConfig
from .service_config import ServiceConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass
class AppConfig:
    """Main configuration with all sub-configs"""

    # Environment
    environment: str = "development"
    debug: bool = False

    default_host: str = "0.0.0.0"

    # Sub-configurations
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    services: ServiceConfig = field(default_factory=ServiceConfig)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=_bool(os.getenv("DEBUG", "true" if env == "development" else "false")),
            default_host=os.getenv("HOST", "0.0.0.0"),
            logging=LoggingConfig.from_env(),
            services=ServiceConfig.from_env(),
        )
