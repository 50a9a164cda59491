# ABOUTME: Configuration package initialization
# ABOUTME: Exports environment configuration and logging setup for the driver library

from driver.config.settings import DriverSettings, get_settings
from driver.config.logging import (
    FileOutput,
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    get_logger,
    profile_config,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
    configure_from_settings,
)

__all__ = [
    "DriverSettings",
    "get_settings",
    "FileOutput",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
    "profile_config",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
    "configure_from_settings",
]
