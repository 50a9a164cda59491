# ABOUTME: Generic mutable-then-frozen settings object used by every configuration level
# ABOUTME: Implements freeze-once semantics, cached hash/representation identity, and cloning

from collections.abc import Mapping
from typing import Any, ClassVar, Dict, Self, Tuple

from loguru import logger
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from driver.common.field import UNSET, SettingsField
from driver.exceptions import InvalidArgumentError, InvalidStateError
from driver.interfaces.freezable import AbstractFreezable

# Hash contribution of an unset field.
UNSET_HASH = 0x2B992DDF


class SettingsObject(AbstractFreezable):
    """
    One level of configuration: a set of named optional fields plus a frozen flag.

    A settings object is a builder while mutable and a value type once frozen.
    Subclasses declare their fields as `SettingsField` class attributes; field
    order follows declaration order, base class fields first.

    Lifecycle:
        created mutable -> optionally resolved against a parent level ->
        frozen exactly once -> shared as an immutable value. `clone()` is the
        only way back to a mutable object.

    Identity:
        The hash and the canonical string representation are computed once,
        at the first successful `freeze()`, and served from cache afterwards.
        Two frozen objects compare by their cached hash and representation;
        otherwise equality is field by field. Representations quote free-text
        values, so distinct values never render alike.

    Attributes:
        parent_type: The settings class this level inherits unset fields from,
            or None for a root level.
    """

    parent_type: ClassVar[type["SettingsObject"] | None] = None
    _fields: ClassVar[Dict[str, SettingsField]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        fields: Dict[str, SettingsField] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, SettingsField):
                    fields[name] = attr
        cls._fields = fields

    def __init__(self, **values: Any) -> None:
        """
        Create a mutable settings object.

        Args:
            **values: Initial field values, validated exactly as by `set`.
        """
        self._values: Dict[str, Any] = {name: UNSET for name in self._fields}
        self._is_frozen = False
        self._frozen_hash = 0
        self._frozen_representation = ""
        for name, value in values.items():
            self.set(name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and name not in self._fields:
            raise InvalidArgumentError(
                f"{type(self).__name__} has no setting named {name!r}.",
                code="UNKNOWN_FIELD",
                details={"field": name, "settings": type(self).__name__},
            )
        super().__setattr__(name, value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_before_validator_function(cls.coerce, core_schema.is_instance_schema(cls))

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """
        Convert a loosely typed value into an instance before type checking.

        Mappings are expanded into keyword arguments. Subclasses extend this to
        accept shorthand forms such as a mode name.

        Args:
            value: The raw value assigned to a field of this type.

        Returns:
            An instance of this class, or the value unchanged for the type
            check to reject.
        """
        if isinstance(value, Mapping):
            return cls(**value)
        return value

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        """Return the declared field names in declaration order."""
        return tuple(cls._fields)

    @classmethod
    def settings_fields(cls) -> Tuple[SettingsField, ...]:
        """Return the declared field descriptors in declaration order."""
        return tuple(cls._fields.values())

    @property
    def is_frozen(self) -> bool:
        return self._is_frozen

    def _field(self, name: str) -> SettingsField:
        try:
            return self._fields[name]
        except KeyError:
            raise InvalidArgumentError(
                f"{type(self).__name__} has no setting named {name!r}.",
                code="UNKNOWN_FIELD",
                details={"field": name, "settings": type(self).__name__},
            ) from None

    def _ensure_mutable(self, name: str) -> None:
        if self._is_frozen:
            raise InvalidStateError(
                f"{type(self).__name__} is frozen.",
                code="SETTINGS_FROZEN",
                details={"field": name, "settings": type(self).__name__},
            )

    def set(self, name: str, value: Any) -> None:
        """
        Assign a field value.

        Args:
            name: The field name.
            value: The new value. None clears an optional field.

        Raises:
            InvalidStateError: If the settings are frozen.
            InvalidArgumentError: If the field is unknown, mandatory and given
                None, or the value fails validation.
        """
        self._ensure_mutable(name)
        self._values[name] = self._field(name).validate(value)

    def get(self, name: str, default: Any = None) -> Any:
        """
        Return a field value, or `default` when the field is unset.

        Legal before and after freezing; never has side effects.
        """
        self._field(name)
        value = self._values[name]
        return default if value is UNSET else value

    def is_set(self, name: str) -> bool:
        """Whether the field currently holds a value."""
        self._field(name)
        return self._values[name] is not UNSET

    def unset(self, name: str) -> None:
        """Clear a field back to unset. Guarded exactly like `set(name, None)`."""
        self.set(name, None)

    def with_values(self, **changes: Any) -> Self:
        """
        Return a mutable clone with the given fields changed.

        The original, frozen or not, is left untouched.
        """
        clone = self.clone()
        for name, value in changes.items():
            clone.set(name, value)
        return clone

    def clone(self) -> Self:
        """
        Return a new, unfrozen settings object with the same field values.

        Values are copied by reference. Frozen state and cached identity are
        never copied.
        """
        clone = type(self)()
        clone._values.update(self._values)
        return clone

    def _validate(self) -> None:
        """Check cross-field constraints before freezing. Subclasses override."""

    def freeze(self) -> Self:
        """
        Freeze the settings in place.

        Nested freezable values are replaced by their frozen copies, then the
        hash and canonical representation are computed and cached. Freezing an
        already frozen object returns it unchanged.

        Returns:
            Self: This same instance, now frozen.

        Raises:
            InvalidArgumentError: If a cross-field constraint of the concrete
                settings class is violated (e.g. tag sets with the primary read
                preference mode). The object stays mutable.
        """
        if self._is_frozen:
            return self

        self._validate()
        for name, value in self._values.items():
            if isinstance(value, AbstractFreezable):
                self._values[name] = value.frozen_copy()

        self._frozen_hash = self._compute_hash()
        self._frozen_representation = self._format()
        self._is_frozen = True
        logger.debug("Froze {} [{}]", type(self).__name__, self._frozen_representation)
        return self

    def frozen_copy(self) -> Self:
        """Return self if frozen, otherwise a frozen clone. Never freezes self."""
        if self._is_frozen:
            return self
        return self.clone().freeze()

    def _compute_hash(self) -> int:
        return hash(
            frozenset(
                (name, UNSET_HASH if value is UNSET else hash(value)) for name, value in self._values.items()
            )
        )

    def _format(self) -> str:
        parts = []
        for name in sorted(self._values):
            parts.append(f"{name}={self._fields[name].format(self._values[name])}")
        return ";".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Return the set fields as a dict, nested settings expanded recursively."""
        result: Dict[str, Any] = {}
        for name, value in self._values.items():
            if value is UNSET:
                continue
            result[name] = value.to_dict() if isinstance(value, SettingsObject) else value
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SettingsObject):
            return NotImplemented
        if type(other) is not type(self):
            return False
        if self._is_frozen and other._is_frozen:
            return (
                self._frozen_hash == other._frozen_hash
                and self._frozen_representation == other._frozen_representation
            )
        return self._values == other._values

    def __hash__(self) -> int:
        if self._is_frozen:
            return self._frozen_hash
        return self._compute_hash()

    def __str__(self) -> str:
        if self._is_frozen:
            return self._frozen_representation
        return self._format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
