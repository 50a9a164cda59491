# ABOUTME: Loguru configuration for the driver settings library
# ABOUTME: Keeps library logging silent until an application opts in, then installs console and file outputs

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from driver.config.settings import DriverSettings

PACKAGE_NAME = "driver"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


class FileOutput(BaseModel):
    """A log file written by loguru, with its own level and rotation policy."""

    path: Path
    level: str = "DEBUG"
    rotation: str = "50 MB"
    retention: str = "14 days"
    compression: Optional[str] = "gz"
    serialize: bool = False


class LoggerConfig(BaseModel):
    """
    Complete description of the handlers `setup_logging` installs.

    Attributes:
        console_enabled: Write to stdout.
        console_level: Minimum level for the console.
        console_colorize: Colour console output; off when output is piped or serialized.
        console_serialize: Emit one JSON object per console line.
        diagnose: Show variable values in tracebacks. Leaks data; never in production.
        files: File outputs, each with its own level.
        enqueue: Hand records to a background thread instead of writing inline.
    """

    console_enabled: bool = True
    console_level: str = "INFO"
    console_colorize: bool = True
    console_serialize: bool = False
    diagnose: bool = False
    files: List[FileOutput] = Field(default_factory=list)
    enqueue: bool = False


class LoggingSettings(BaseSettings):
    """Logging options read from `DRIVER_LOG_*` environment variables.

    `DRIVER_LOG_FILE_PATH` adds a file output; without it only the console
    is used.
    """

    model_config = SettingsConfigDict(env_prefix="DRIVER_LOG_", env_file=".env", extra="ignore")

    level: str = "INFO"
    colorize: bool = True
    file_path: Optional[Path] = None

    def to_config(self) -> LoggerConfig:
        level = self.level.upper()
        files = [FileOutput(path=self.file_path, level=level)] if self.file_path else []
        return LoggerConfig(console_level=level, console_colorize=self.colorize, files=files)


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Replace all loguru handlers according to `config` and enable driver messages.

    Args:
        config: Handlers to install. Defaults to `LoggingSettings().to_config()`.
    """
    config = config or LoggingSettings().to_config()

    logger.remove()
    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=CONSOLE_FORMAT,
            colorize=config.console_colorize and not config.console_serialize,
            serialize=config.console_serialize,
            backtrace=config.diagnose,
            diagnose=config.diagnose,
            enqueue=config.enqueue,
        )

    for output in config.files:
        output.path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            output.path,
            level=output.level,
            format=FILE_FORMAT,
            rotation=output.rotation,
            retention=output.retention,
            compression=output.compression,
            serialize=output.serialize,
            enqueue=config.enqueue,
        )

    logger.enable(PACKAGE_NAME)


def get_logger(component: str):
    """Return the shared logger with `component` bound into each record's extras."""
    return logger.bind(component=component)


def profile_config(env: str, level: Optional[str] = None) -> LoggerConfig:
    """
    Build the logger configuration for a runtime environment.

    Args:
        env: "testing", "development", "staging" or "production".
        level: Console level override. Ignored by the production profile.

    Returns:
        The LoggerConfig for that environment.
    """
    if env == "production":
        return LoggerConfig(
            console_level="INFO",
            console_colorize=False,
            console_serialize=True,
            files=[
                FileOutput(path=Path("logs/driver.log"), level="DEBUG"),
                FileOutput(path=Path("logs/driver-errors.log"), level="ERROR"),
            ],
            enqueue=True,
        )
    if env == "testing":
        return LoggerConfig(console_level=level or "DEBUG", console_colorize=False)
    return LoggerConfig(console_level=level or "DEBUG", diagnose=env == "development")


def configure_for_testing() -> None:
    setup_logging(profile_config("testing"))


def configure_for_development() -> None:
    setup_logging(profile_config("development"))


def configure_for_production() -> None:
    setup_logging(profile_config("production"))


def configure_from_settings(settings: DriverSettings) -> None:
    """
    Configure logging from the driver's environment configuration.

    Production uses the production profile. Elsewhere the console logs at
    `LOG_LEVEL` (DEBUG when `DEBUG` is set), as JSON lines when `LOG_FORMAT`
    is "json".

    Args:
        settings: The driver configuration, typically `get_settings()`.
    """
    if settings.ENV == "production":
        setup_logging(profile_config("production"))
        return

    config = profile_config(settings.ENV, "DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
    config.console_serialize = settings.LOG_FORMAT == "json"
    setup_logging(config)
