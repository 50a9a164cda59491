# ABOUTME: Driver package initialization for the hierarchical settings model
# ABOUTME: Provides freezable server, database and collection settings with inheritance

"""
Driver settings package.

This package provides the settings model of a document-database client:
mutable settings objects that are frozen into immutable, hashable values,
with unset fields inherited level by level (server -> database ->
collection).
"""

from loguru import logger

# Silent until an application calls driver.config.setup_logging().
logger.disable("driver")

from driver.common import UNSET, SettingsField, SettingsObject, derive, resolve_chain, resolve_inherited
from driver.exceptions import DriverException, InvalidArgumentError, InvalidStateError
from driver.models import Credentials, GuidRepresentation, ReadPreference, ReadPreferenceMode, WriteConcern
from driver.settings import CollectionSettings, DatabaseSettings, ServerSettings

__version__ = "0.1.0"

__all__ = [
    "UNSET",
    "SettingsField",
    "SettingsObject",
    "derive",
    "resolve_chain",
    "resolve_inherited",
    "DriverException",
    "InvalidArgumentError",
    "InvalidStateError",
    "Credentials",
    "GuidRepresentation",
    "ReadPreference",
    "ReadPreferenceMode",
    "WriteConcern",
    "ServerSettings",
    "DatabaseSettings",
    "CollectionSettings",
]
