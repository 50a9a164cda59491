# ABOUTME: Freezable write concern (write acknowledgment mode) nested inside every settings level
# ABOUTME: Describes whether and how thoroughly the server must acknowledge writes

from datetime import timedelta
from typing import Annotated, Any, ClassVar, Union

from pydantic import Field

from driver.common import SettingsField, SettingsObject
from driver.exceptions import InvalidArgumentError

WValue = Union[Annotated[int, Field(ge=0)], Annotated[str, Field(min_length=1)]]
WTimeout = Annotated[timedelta, Field(ge=timedelta(0))]

_ACKNOWLEDGED_NAMES = {"acknowledged", "ack", "safe"}
_UNACKNOWLEDGED_NAMES = {"unacknowledged", "unack", "unsafe"}


class WriteConcern(SettingsObject):
    """
    Write acknowledgment mode.

    `enabled` says whether writes are acknowledged at all; the remaining
    fields refine an acknowledged write: `w` is the number of members (or a
    tag/"majority") that must confirm it, `wtimeout` bounds the wait, and
    `fsync` / `journal` require durability before the reply.

    Setting any refinement while `enabled` is unset implies an acknowledged
    write, so `enabled` is switched on at the same time. An explicit
    `enabled=False` is kept, whatever the assignment order, and combining it
    with refinements fails on `freeze()`. Shared frozen instances:
    `ACKNOWLEDGED`, `UNACKNOWLEDGED`, `W2`, `W3`, `W4`.

    Assigning True/False or "acknowledged"/"unacknowledged" to a write
    concern field yields the matching shared instance; an integer yields a
    frozen write concern with that `w`.
    """

    enabled = SettingsField(bool, required=True, description="Whether writes are acknowledged")
    w = SettingsField(WValue, description="Members (or tag set name, or 'majority') that must confirm")
    wtimeout = SettingsField(WTimeout, description="How long to wait for the w members")
    fsync = SettingsField(bool, description="Require an fsync before acknowledging")
    journal = SettingsField(bool, description="Require a journal commit before acknowledging")

    ACKNOWLEDGED: ClassVar["WriteConcern"]
    UNACKNOWLEDGED: ClassVar["WriteConcern"]
    W2: ClassVar["WriteConcern"]
    W3: ClassVar["WriteConcern"]
    W4: ClassVar["WriteConcern"]

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return cls.ACKNOWLEDGED if value else cls.UNACKNOWLEDGED
        if isinstance(value, int):
            return cls(w=value).freeze()
        if isinstance(value, str):
            name = value.strip().lower()
            if name in _ACKNOWLEDGED_NAMES:
                return cls.ACKNOWLEDGED
            if name in _UNACKNOWLEDGED_NAMES:
                return cls.UNACKNOWLEDGED
            return value
        return super().coerce(value)

    def set(self, name: str, value: Any) -> None:
        super().set(name, value)
        if name != "enabled" and self.is_set(name) and not self.is_set("enabled"):
            self._values["enabled"] = True

    @property
    def is_acknowledged(self) -> bool:
        """Whether the server must acknowledge writes."""
        return self.enabled is True

    def _validate(self) -> None:
        if self.enabled is False:
            refinements = [name for name in ("w", "wtimeout", "fsync", "journal") if self.is_set(name)]
            if refinements:
                raise InvalidArgumentError(
                    "An unacknowledged write concern cannot carry acknowledgment options.",
                    code="INVALID_VALUE",
                    details={"fields": refinements},
                )


WriteConcern.ACKNOWLEDGED = WriteConcern(enabled=True).freeze()
WriteConcern.UNACKNOWLEDGED = WriteConcern(enabled=False).freeze()
WriteConcern.W2 = WriteConcern(w=2).freeze()
WriteConcern.W3 = WriteConcern(w=3).freeze()
WriteConcern.W4 = WriteConcern(w=4).freeze()
