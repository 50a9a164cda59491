# ABOUTME: Core exception classes for the driver settings library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class DriverException(Exception):
    """Base exception class for the driver settings library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize DriverException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class InvalidStateError(DriverException):
    """Exception raised when an operation is illegal in the object's current state.

    Used when a settings object is asked to change after it was frozen, such as:
    - Assigning or clearing a field of a frozen settings object
    - Resolving inherited values into a frozen child

    Signals a usage bug: configuration must be finished before freezing.
    """

    pass


class InvalidArgumentError(DriverException):
    """Exception raised when a supplied value violates a field's contract.

    Used when a settings operation receives an unacceptable argument, such as:
    - None for a mandatory field (read preference, write concern)
    - A value that cannot be coerced to the field's declared type
    - A field name the settings class does not declare
    - A parent settings object from the wrong hierarchy level

    Should include the offending field name in details where one applies.
    """

    pass
