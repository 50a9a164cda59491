# ABOUTME: Server-level settings, the root of the settings hierarchy
# ABOUTME: Holds driver-wide defaults that database settings inherit

from typing import Optional

from driver.common import SettingsField, SettingsObject
from driver.config.settings import DriverSettings, get_settings
from driver.models import Credentials, GuidRepresentation, ReadPreference, WriteConcern


class ServerSettings(SettingsObject):
    """
    The settings used to access a server.

    Root of the hierarchy: it inherits from nothing, so it must itself hold
    every mandatory value that lower levels may leave unset. `from_config()`
    builds such a fully populated root from the environment configuration.

    Database settings inherit `default_credentials` as their `credentials`,
    and `guid_representation`, `read_preference` and `write_concern` under
    the same names.
    """

    default_credentials = SettingsField(Credentials, description="Credentials used when a database sets none")
    guid_representation = SettingsField(GuidRepresentation, description="Representation to use for GUIDs")
    read_preference = SettingsField(ReadPreference, required=True, description="Default read preference")
    write_concern = SettingsField(WriteConcern, required=True, description="Default write concern")
    assign_id_on_insert = SettingsField(bool, description="Whether inserts assign missing document ids")

    @classmethod
    def from_config(cls, config: Optional[DriverSettings] = None) -> "ServerSettings":
        """
        Build mutable, fully populated root settings from the driver configuration.

        Args:
            config: The environment configuration. Defaults to `get_settings()`.

        Returns:
            A new unfrozen ServerSettings; callers may still add credentials
            or override values before freezing.
        """
        config = config or get_settings()
        return cls(
            guid_representation=config.GUID_REPRESENTATION,
            read_preference=config.READ_PREFERENCE,
            write_concern=config.WRITE_CONCERN,
            assign_id_on_insert=config.ASSIGN_ID_ON_INSERT,
        )
