# ABOUTME: Database-level settings resolved against server settings
# ABOUTME: Declares credentials, GUID representation, read preference and write concern for one database

from driver.common import SettingsField, SettingsObject
from driver.models import Credentials, GuidRepresentation, ReadPreference, WriteConcern
from driver.settings.server import ServerSettings


class DatabaseSettings(SettingsObject):
    """The settings used to access a database.

    Unset fields inherit from the server settings; `credentials` comes from
    the server's `default_credentials`.
    """

    parent_type = ServerSettings

    credentials = SettingsField(
        Credentials,
        inherit_from="default_credentials",
        description="Credentials to access the database",
    )
    guid_representation = SettingsField(GuidRepresentation, description="Representation to use for GUIDs")
    read_preference = SettingsField(ReadPreference, required=True, description="Read preference")
    write_concern = SettingsField(WriteConcern, required=True, description="Write concern")
