"""
Service Logger Setup

Configures one named logger per microservice from LoggingConfig.
"""

import logging
import sys
from typing import Optional

from .config import LoggingConfig


def setup_service_logger(service_name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure and return the logger for a service.

    Handlers are attached once; calling this again for the same service only
    updates the level.

    Args:
        service_name: Logger name, e.g. "weather_service"
        level: Overrides LOG_LEVEL when given

    Returns:
        Configured logger
    """
    config = LoggingConfig.from_env()
    logger = logging.getLogger(service_name)
    logger.setLevel((level or config.log_level).upper())

    if logger.handlers:
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Module loggers under microservices.* share the same handlers
    package_logger = logging.getLogger(f"microservices.{service_name}")
    package_logger.setLevel(logger.level)
    for handler in logger.handlers:
        package_logger.addHandler(handler)

    return logger


__all__ = ["setup_service_logger"]
