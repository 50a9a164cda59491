# ABOUTME: Declarative settings field descriptor and the UNSET sentinel
# ABOUTME: Validates and coerces assigned values through pydantic type adapters

from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar, overload

from pydantic import TypeAdapter, ValidationError

from driver.exceptions import InvalidArgumentError
from driver.interfaces.freezable import AbstractFreezable

T = TypeVar("T")


class _Unset:
    """Marker for a field that holds no value at all.

    Distinct from None and from any type's default value: an unset field is
    filled by inheritance, an explicitly set one never is.
    """

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<unset>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class SettingsField(Generic[T]):
    """
    A single named, independently optional attribute of a settings object.

    Declared as a class attribute on a `SettingsObject` subclass. Reading the
    attribute returns the current value (None when unset); assigning routes
    through the owner's `set`, which enforces the frozen check before the
    value is validated here.

    Example:
        class DatabaseSettings(SettingsObject):
            credentials = SettingsField(Credentials, inherit_from="default_credentials")
            read_preference = SettingsField(ReadPreference, required=True)

    Attributes:
        annotation: The declared value type, used to build the pydantic adapter.
        required: Mandatory fields reject None; they may still be unset until
            the hierarchy root resolves them.
        inherit: Whether inheritance resolution may fill this field.
        description: Human-readable description.
        name: Attribute name, assigned when the owning class is created.
    """

    def __init__(
        self,
        annotation: Any,
        *,
        required: bool = False,
        inherit: bool = True,
        inherit_from: str | None = None,
        formatter: Callable[[T], str] | None = None,
        description: str = "",
    ) -> None:
        self.annotation = annotation
        self.required = required
        self.inherit = inherit
        self.description = description
        self.name = ""
        self._inherit_from = inherit_from
        self._formatter = formatter
        self._adapter: TypeAdapter[T] = TypeAdapter(annotation)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @property
    def parent_field(self) -> str:
        """Name of the field read from the parent level during inheritance."""
        return self._inherit_from or self.name

    @overload
    def __get__(self, instance: None, owner: type) -> "SettingsField[T]": ...

    @overload
    def __get__(self, instance: object, owner: type) -> Optional[T]: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance, value: Any) -> None:
        instance.set(self.name, value)

    def __delete__(self, instance) -> None:
        instance.unset(self.name)

    def validate(self, value: Any) -> Any:
        """
        Coerce a value for storage in this field.

        Args:
            value: The value being assigned. None or UNSET clears the field.

        Returns:
            The validated value, or UNSET when the field is being cleared.

        Raises:
            InvalidArgumentError: If the field is mandatory and value is None,
                or if the value cannot be coerced to the declared type.
        """
        if value is None or value is UNSET:
            if self.required:
                raise InvalidArgumentError(
                    f"{self.name} cannot be None.",
                    code="MANDATORY_FIELD",
                    details={"field": self.name},
                )
            return UNSET

        try:
            return self._adapter.validate_python(value)
        except ValidationError as exc:
            raise InvalidArgumentError(
                f"Invalid value for {self.name}: {value!r}",
                code="INVALID_VALUE",
                details={"field": self.name, "errors": exc.errors(include_url=False)},
            ) from exc

    def format(self, value: Any) -> str:
        """
        Render a stored value for the canonical string representation.

        The rendering never contains an unquoted `;`, `=` or unbalanced brace,
        so distinct field values always give distinct representations:
        nested settings are wrapped in `{}`, enum members, numbers and
        booleans render as themselves, and everything else renders as a
        Python string literal of its `str()`.
        """
        if value is UNSET:
            return repr(UNSET)
        if self._formatter is not None:
            return self._formatter(value)
        if isinstance(value, AbstractFreezable):
            return "{" + str(value) + "}"
        if isinstance(value, (Enum, bool, int, float)):
            return str(value)
        return repr(str(value))

    def __repr__(self) -> str:
        return f"SettingsField(name={self.name!r}, required={self.required}, inherit={self.inherit})"
