from enum import Enum


class GuidRepresentation(str, Enum):
    """Enumeration for the byte order used when storing GUID/UUID values.

    Drivers written for different platforms historically stored UUIDs with
    different byte orders. Every level of the settings hierarchy may pick one;
    unset levels inherit the enclosing level's choice.

    Attributes:
        UNSPECIFIED (str): No representation chosen; UUIDs cannot be encoded.
        STANDARD (str): RFC 4122 byte order.
        CSHARP_LEGACY (str): Legacy .NET driver byte order.
        JAVA_LEGACY (str): Legacy Java driver byte order.
        PYTHON_LEGACY (str): Legacy Python driver byte order.
    """

    UNSPECIFIED = "unspecified"
    STANDARD = "standard"
    CSHARP_LEGACY = "csharp_legacy"
    JAVA_LEGACY = "java_legacy"
    PYTHON_LEGACY = "python_legacy"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"GuidRepresentation.{self.name}"


class ReadPreferenceMode(str, Enum):
    """
    Enumeration for which replica set members may serve reads.

    Attributes:
        PRIMARY (str): Read only from the primary.
        PRIMARY_PREFERRED (str): Read from the primary, falling back to secondaries.
        SECONDARY (str): Read only from secondaries.
        SECONDARY_PREFERRED (str): Read from secondaries, falling back to the primary.
        NEAREST (str): Read from the member with the lowest latency.
    """

    PRIMARY = "primary"
    PRIMARY_PREFERRED = "primary_preferred"
    SECONDARY = "secondary"
    SECONDARY_PREFERRED = "secondary_preferred"
    NEAREST = "nearest"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ReadPreferenceMode.{self.name}"
