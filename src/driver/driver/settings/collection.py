# ABOUTME: Collection-level settings resolved against database settings
# ABOUTME: Leaf of the settings hierarchy

from driver.common import SettingsField, SettingsObject
from driver.models import GuidRepresentation, ReadPreference, WriteConcern
from driver.settings.database import DatabaseSettings


class CollectionSettings(SettingsObject):
    """The settings used to access a collection.

    `guid_representation`, `read_preference` and `write_concern` inherit from
    the database settings. `assign_id_on_insert` is never inherited; when left
    unset the consumer applies the driver default.
    """

    parent_type = DatabaseSettings

    assign_id_on_insert = SettingsField(
        bool,
        inherit=False,
        description="Whether inserts assign missing document ids",
    )
    guid_representation = SettingsField(GuidRepresentation, description="Representation to use for GUIDs")
    read_preference = SettingsField(ReadPreference, required=True, description="Read preference")
    write_concern = SettingsField(WriteConcern, required=True, description="Write concern")
