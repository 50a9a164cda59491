# ABOUTME: Exceptions package exports
# ABOUTME: Exports the base driver exception and the settings error taxonomy

from driver.exceptions.base import (
    DriverException,
    InvalidStateError,
    InvalidArgumentError,
)

__all__ = [
    "DriverException",
    "InvalidStateError",
    "InvalidArgumentError",
]
