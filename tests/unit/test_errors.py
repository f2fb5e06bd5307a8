"""Unit tests for the errors module."""

from unittest.mock import MagicMock

import pytest

from baseline_audit.utils.errors import (
    BaselineAuditError,
    NetworkError,
    ValidationError,
    require_system_name,
    retry,
)


class TestBaselineAuditError:
    """Tests for base BaselineAuditError."""

    def test_basic_error(self):
        error = BaselineAuditError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "UNKNOWN_ERROR"
        assert error.details == {}

    def test_to_audit_error(self):
        error = BaselineAuditError("Test error", code="TEST_ERROR", details={"key": "value"})
        audit_error = error.to_audit_error()

        assert audit_error.code == "TEST_ERROR"
        assert audit_error.message == "Test error"
        assert audit_error.details == {"key": "value"}
        assert str(audit_error) == "[TEST_ERROR] Test error"


class TestSubclasses:
    """Tests for the specific error types."""

    def test_validation_error(self):
        error = ValidationError("bad value", field="systemName")
        assert error.code == "VALIDATION_ERROR"
        assert error.details == {"field": "systemName"}
        assert isinstance(error, BaselineAuditError)

    def test_network_error(self):
        error = NetworkError("refused", url="http://collector:3000", status_code=503)
        assert error.code == "NETWORK_ERROR"
        assert error.details == {"url": "http://collector:3000", "status_code": 503}


class TestRequireSystemName:
    """Tests for require_system_name."""

    def test_valid(self):
        assert require_system_name({"systemName": "LAB-PC-01"}) == "LAB-PC-01"

    @pytest.mark.parametrize("payload", [None, [], "LAB", {}, {"systemName": ""}, {"systemName": 7}])
    def test_invalid(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            require_system_name(payload)

        assert exc_info.value.code == "MISSING_SYSTEM_NAME"
        assert exc_info.value.message == "Missing systemName in request body"


class TestRetry:
    """Tests for the retry decorator."""

    def test_success_first_try(self):
        func = MagicMock(return_value="ok")
        assert retry(max_attempts=3, delay=0)(func)() == "ok"
        assert func.call_count == 1

    def test_retries_then_succeeds(self):
        func = MagicMock(side_effect=[TimeoutError("slow"), "ok"])
        decorated = retry(max_attempts=3, delay=0, exceptions=(TimeoutError,))(func)

        assert decorated() == "ok"
        assert func.call_count == 2

    def test_gives_up(self):
        func = MagicMock(side_effect=TimeoutError("slow"))
        decorated = retry(max_attempts=2, delay=0, exceptions=(TimeoutError,))(func)

        with pytest.raises(TimeoutError):
            decorated()
        assert func.call_count == 2

    def test_other_exceptions_not_retried(self):
        func = MagicMock(side_effect=KeyError("x"))
        decorated = retry(max_attempts=3, delay=0, exceptions=(TimeoutError,))(func)

        with pytest.raises(KeyError):
            decorated()
        assert func.call_count == 1

    def test_single_attempt(self):
        func = MagicMock(side_effect=TimeoutError("slow"))
        with pytest.raises(TimeoutError):
            retry(max_attempts=1, delay=0, exceptions=(TimeoutError,))(func)()
        assert func.call_count == 1

    def test_invalid_attempts(self):
        with pytest.raises(ValueError):
            retry(max_attempts=0)

    def test_retry_is_logged(self, caplog):
        func = MagicMock(side_effect=[TimeoutError("slow"), "ok"])
        func.__name__ = "submit"
        decorated = retry(max_attempts=2, delay=0, exceptions=(TimeoutError,))(func)

        with caplog.at_level("WARNING", logger="baseline_audit"):
            decorated()

        assert "submit failed (slow)" in caplog.text
