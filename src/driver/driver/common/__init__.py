# ABOUTME: Generic freeze and inheritance machinery shared by all settings levels
# ABOUTME: Exports the settings field descriptor, settings object base and resolver functions

from .field import UNSET, SettingsField
from .freezable import SettingsObject
from .resolver import derive, resolve_chain, resolve_inherited

__all__ = [
    "UNSET",
    "SettingsField",
    "SettingsObject",
    "derive",
    "resolve_chain",
    "resolve_inherited",
]
