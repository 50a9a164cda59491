# ABOUTME: Models package initialization
# ABOUTME: Exports the value types held by settings fields

from .credentials import Credentials
from .enum import GuidRepresentation, ReadPreferenceMode
from .read_preference import ReadPreference
from .write_concern import WriteConcern

__all__ = [
    "Credentials",
    "GuidRepresentation",
    "ReadPreferenceMode",
    "ReadPreference",
    "WriteConcern",
]
