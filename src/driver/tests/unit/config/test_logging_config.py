# ABOUTME: Unit tests for loguru logging configuration of the driver library
# ABOUTME: Tests library silence by default, opt-in setup and environment-driven profiles

import json
import sys

import pytest
from loguru import logger

from driver.config.logging import (
    PACKAGE_NAME,
    FileOutput,
    LoggerConfig,
    LoggingSettings,
    configure_for_development,
    configure_for_production,
    configure_for_testing,
    configure_from_settings,
    get_logger,
    profile_config,
    setup_logging,
)
from driver.config.settings import DriverSettings
from driver.models import ReadPreference


@pytest.fixture
def restore_logger():
    """Restore loguru's default handler and the library's disabled state after a test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable(PACKAGE_NAME)


@pytest.fixture
def messages(restore_logger):
    """Collect formatted messages from a list sink."""
    collected = []
    logger.remove()
    logger.add(collected.append, level="DEBUG", format="{name} | {message}")
    return collected


class TestLoggerConfig:
    """Test suite for LoggerConfig, LoggingSettings and the environment profiles."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_default_config(self):
        """Test the default logger configuration."""
        config = LoggerConfig()

        assert config.console_enabled is True
        assert config.console_level == "INFO"
        assert config.console_serialize is False
        assert config.diagnose is False
        assert config.files == []

    @pytest.mark.unit
    @pytest.mark.config
    def test_logging_settings_defaults_to_console_only(self, clean_env):
        """Test that without DRIVER_LOG_FILE_PATH no file output is configured."""
        config = LoggingSettings().to_config()

        assert config.console_level == "INFO"
        assert config.files == []

    @pytest.mark.unit
    @pytest.mark.config
    def test_logging_settings_from_environment(self, clean_env, monkeypatch):
        """Test that logging settings read DRIVER_LOG_ variables."""
        monkeypatch.setenv("DRIVER_LOG_LEVEL", "warning")
        monkeypatch.setenv("DRIVER_LOG_COLORIZE", "false")
        monkeypatch.setenv("DRIVER_LOG_FILE_PATH", "var/app.log")

        config = LoggingSettings().to_config()

        assert config.console_level == "WARNING"
        assert config.console_colorize is False
        assert [(str(output.path), output.level) for output in config.files] == [("var/app.log", "WARNING")]

    @pytest.mark.unit
    @pytest.mark.config
    def test_production_profile(self):
        """Test that production logs JSON to the console plus a full and an error-only file."""
        config = profile_config("production", "WARNING")

        assert config.console_serialize is True
        assert config.console_level == "INFO"
        assert config.diagnose is False
        assert [(str(output.path), output.level) for output in config.files] == [
            ("logs/driver.log", "DEBUG"),
            ("logs/driver-errors.log", "ERROR"),
        ]

    @pytest.mark.unit
    @pytest.mark.config
    @pytest.mark.parametrize("env, diagnose", [("development", True), ("staging", False), ("testing", False)])
    def test_non_production_profiles_are_console_only(self, env, diagnose):
        """Test that other profiles only use the console, at the requested level."""
        config = profile_config(env, "INFO")

        assert config.console_level == "INFO"
        assert config.diagnose is diagnose
        assert config.files == []
        assert profile_config(env).console_level == "DEBUG"


class TestLibraryLogging:
    """Test suite for the library's opt-in logging."""

    @pytest.mark.unit
    def test_library_is_silent_by_default(self, messages):
        """Test that freezing settings emits nothing until logging is enabled."""
        ReadPreference("nearest", tag_sets=[{"dc": "ny"}]).freeze()

        assert messages == []

    @pytest.mark.unit
    def test_freeze_is_logged_once_enabled(self, messages):
        """Test that enabling the package surfaces debug messages from freeze."""
        logger.enable(PACKAGE_NAME)

        ReadPreference("nearest", tag_sets=[{"dc": "ny"}]).freeze()

        assert any("Froze ReadPreference" in message for message in messages)
        assert any(message.startswith("driver.common.freezable") for message in messages)

    @pytest.mark.unit
    def test_setup_logging_enables_library(self, restore_logger, clean_env, capsys):
        """Test that setup_logging installs a console handler and enables the package."""
        setup_logging(LoggerConfig(console_level="DEBUG", console_colorize=False, enqueue=False))

        ReadPreference("secondary", tag_sets=[{"dc": "sf"}]).freeze()

        assert "Froze ReadPreference" in capsys.readouterr().out

    @pytest.mark.unit
    def test_setup_logging_writes_file(self, restore_logger, clean_env, tmp_path):
        """Test that an enabled file output creates its directory and file."""
        log_path = tmp_path / "nested" / "driver.log"
        setup_logging(LoggerConfig(console_enabled=False, files=[FileOutput(path=log_path, level="INFO")]))

        get_logger("tests").info("written to file")

        assert "written to file" in log_path.read_text()

    @pytest.mark.unit
    def test_get_logger_binds_component(self, messages):
        """Test that get_logger binds the component into the record extras."""
        records = []
        logger.add(lambda message: records.append(message.record), level="INFO")

        get_logger("component").info("hello")

        assert records[-1]["extra"]["component"] == "component"


class TestConfigureFromSettings:
    """Test suite for environment-driven logging profiles."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_json_format_serializes_console_output(self, restore_logger, capsys):
        """Test that LOG_FORMAT=json produces JSON lines."""
        configure_from_settings(DriverSettings(LOG_FORMAT="json", LOG_LEVEL="INFO"))

        logger.info("structured message")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["record"]["message"] == "structured message"

    @pytest.mark.unit
    @pytest.mark.config
    def test_log_level_filters_messages(self, restore_logger, capsys):
        """Test that messages below LOG_LEVEL are dropped."""
        configure_from_settings(DriverSettings(LOG_LEVEL="WARNING"))

        logger.info("hidden message")
        logger.warning("visible message")

        out = capsys.readouterr().out
        assert "hidden message" not in out
        assert "visible message" in out

    @pytest.mark.unit
    @pytest.mark.config
    def test_debug_flag_lowers_level(self, restore_logger, capsys):
        """Test that DEBUG=True logs debug messages regardless of LOG_LEVEL."""
        configure_from_settings(DriverSettings(DEBUG=True, LOG_LEVEL="ERROR"))

        logger.debug("debug message")

        assert "debug message" in capsys.readouterr().out

    @pytest.mark.unit
    @pytest.mark.config
    def test_production_profile_writes_log_files(self, restore_logger, clean_env, tmp_path):
        """Test that the production profile adds file outputs under logs/."""
        configure_for_production()

        logger.error("production failure")
        logger.complete()

        assert (tmp_path / "logs" / "driver.log").exists()
        assert "production failure" in (tmp_path / "logs" / "driver-errors.log").read_text()

    @pytest.mark.unit
    @pytest.mark.config
    def test_testing_profile_logs_library_debug(self, restore_logger, capsys):
        """Test that the testing profile writes library debug messages to stdout."""
        configure_for_testing()

        ReadPreference("secondary", tag_sets=[{"dc": "ny"}]).freeze()

        assert "Froze ReadPreference" in capsys.readouterr().out

    @pytest.mark.unit
    @pytest.mark.config
    def test_development_profile_logs_library_debug(self, restore_logger, capsys):
        """Test that the development profile enables debug output for the library."""
        configure_for_development()

        ReadPreference("nearest", tag_sets=[{"dc": "ny"}]).freeze()
        logger.complete()

        assert "Froze ReadPreference" in capsys.readouterr().out
