# ABOUTME: Hierarchical settings levels package exports
# ABOUTME: Exports server, database and collection settings

from .server import ServerSettings
from .database import DatabaseSettings
from .collection import CollectionSettings

__all__ = [
    "ServerSettings",
    "DatabaseSettings",
    "CollectionSettings",
]
