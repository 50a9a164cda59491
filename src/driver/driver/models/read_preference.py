# ABOUTME: Freezable read preference value nested inside every settings level
# ABOUTME: Combines a read preference mode with optional replica set tag sets

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Dict, Tuple

from pydantic import BeforeValidator

from driver.common import SettingsField, SettingsObject
from driver.exceptions import InvalidArgumentError
from driver.models.enum import ReadPreferenceMode

TagSet = Tuple[Tuple[str, str], ...]


def _normalize_tag_sets(value: Any) -> Any:
    # Mappings become sorted key/value tuples so tag sets hash and compare by content.
    if isinstance(value, (list, tuple)):
        return tuple(tuple(sorted(tag_set.items())) if isinstance(tag_set, Mapping) else tag_set for tag_set in value)
    return value


def _format_tag_sets(tag_sets: Tuple[TagSet, ...]) -> str:
    rendered = ["{" + ",".join(f"{key!r}:{value!r}" for key, value in tag_set) + "}" for tag_set in tag_sets]
    return "[" + ",".join(rendered) + "]"


TagSets = Annotated[Tuple[TagSet, ...], BeforeValidator(_normalize_tag_sets)]


class ReadPreference(SettingsObject):
    """
    Which replica set members may serve reads, and which tags they must carry.

    A read preference is itself a settings object: it is mutable until frozen,
    and a settings level freezes its read preference (via `frozen_copy`) when
    the level is frozen. Shared frozen instances exist for every mode without
    tags, e.g. `ReadPreference.PRIMARY`.

    Assigning a mode name or `ReadPreferenceMode` to a read preference field
    yields the shared frozen instance for that mode.

    Example:
        >>> pref = ReadPreference("secondary", tag_sets=[{"dc": "ny"}, {}])
        >>> str(pref.freeze())
        "mode=secondary;tag_sets=[{'dc':'ny'},{}]"
    """

    mode = SettingsField(ReadPreferenceMode, required=True, description="Which members may serve reads")
    tag_sets = SettingsField(
        TagSets,
        formatter=_format_tag_sets,
        description="Ordered tag sets; a member must match every tag of one set",
    )

    PRIMARY: ClassVar["ReadPreference"]
    PRIMARY_PREFERRED: ClassVar["ReadPreference"]
    SECONDARY: ClassVar["ReadPreference"]
    SECONDARY_PREFERRED: ClassVar["ReadPreference"]
    NEAREST: ClassVar["ReadPreference"]

    def __init__(self, mode: ReadPreferenceMode | str | None = None, **values: Any) -> None:
        if mode is not None:
            values["mode"] = mode
        super().__init__(**values)

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return _SHARED[ReadPreferenceMode(value.strip().lower())]
            except ValueError:
                return value
        return super().coerce(value)

    @property
    def secondary_ok(self) -> bool:
        """Whether reads may be served by a secondary."""
        return self.mode not in (None, ReadPreferenceMode.PRIMARY)

    def _validate(self) -> None:
        if self.mode == ReadPreferenceMode.PRIMARY and self.tag_sets:
            raise InvalidArgumentError(
                "Tag sets cannot be combined with the primary read preference mode.",
                code="INVALID_VALUE",
                details={"field": "tag_sets", "mode": str(self.mode)},
            )


_SHARED: Dict[ReadPreferenceMode, ReadPreference] = {mode: ReadPreference(mode).freeze() for mode in ReadPreferenceMode}

ReadPreference.PRIMARY = _SHARED[ReadPreferenceMode.PRIMARY]
ReadPreference.PRIMARY_PREFERRED = _SHARED[ReadPreferenceMode.PRIMARY_PREFERRED]
ReadPreference.SECONDARY = _SHARED[ReadPreferenceMode.SECONDARY]
ReadPreference.SECONDARY_PREFERRED = _SHARED[ReadPreferenceMode.SECONDARY_PREFERRED]
ReadPreference.NEAREST = _SHARED[ReadPreferenceMode.NEAREST]
