# ABOUTME: Main configuration composition for the driver.
# ABOUTME: Assembles all configuration classes into a single, cached settings object.

from functools import lru_cache

from ._base import BaseDriverSettings


class DriverSettings(BaseDriverSettings):
    """Represents the complete, composed environment configuration of the driver.

    This class is the final aggregator for environment-level configuration.
    It inherits from `BaseDriverSettings` and is the place to mix in further
    settings classes through inheritance.

    Not to be confused with the hierarchical settings objects in
    `driver.settings`: this object only seeds their root, via
    `ServerSettings.from_config()`.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> DriverSettings:
    """Provides a singleton instance of the driver configuration.

    This function uses a cache (`lru_cache`) to ensure that the settings
    object is instantiated only once, so environment variables and `.env`
    files are read a single time and every caller sees the same values.

    Returns:
        A single, cached instance of the DriverSettings class.
    """
    return DriverSettings()


# A globally accessible, singleton instance of the driver configuration.
settings = get_settings()
