# ABOUTME: Unit tests for driver exception classes
# ABOUTME: Tests message, code and details handling and the settings error taxonomy
import pytest

from driver.exceptions import DriverException, InvalidArgumentError, InvalidStateError


class TestDriverException:
    """Test cases for DriverException base class."""

    @pytest.mark.unit
    def test_driver_exception_with_message_only(self):
        """Test DriverException with message only."""
        message = "Test error message"
        exception = DriverException(message)

        assert exception.message == message
        assert exception.code is None
        assert exception.details == {}
        assert str(exception) == message

    @pytest.mark.unit
    def test_driver_exception_with_all_parameters(self):
        """Test DriverException with all parameters."""
        details = {"field": "read_preference", "settings": "DatabaseSettings"}

        exception = DriverException("boom", "TEST_ERROR", details)

        assert exception.message == "boom"
        assert exception.code == "TEST_ERROR"
        assert exception.details == details

    @pytest.mark.unit
    def test_driver_exception_details_are_copied(self):
        """Test that later changes to the caller's dict do not leak into the exception."""
        original_details = {"key": "value"}
        exception = DriverException("test", details=original_details)

        original_details["new_key"] = "new_value"

        assert exception.details == {"key": "value"}


class TestSettingsErrors:
    """Test cases for the settings error taxonomy."""

    @pytest.mark.unit
    @pytest.mark.parametrize("exception_class", [InvalidStateError, InvalidArgumentError])
    def test_inherits_from_driver_exception(self, exception_class):
        """Test that both settings errors are DriverExceptions."""
        exception = exception_class("bad", code="CODE")

        assert isinstance(exception, DriverException)
        assert isinstance(exception, Exception)
        assert exception.code == "CODE"

    @pytest.mark.unit
    def test_errors_are_distinct(self):
        """Test that catching one settings error does not catch the other."""
        with pytest.raises(InvalidStateError):
            try:
                raise InvalidStateError("frozen")
            except InvalidArgumentError:
                pytest.fail("InvalidStateError must not be an InvalidArgumentError")
