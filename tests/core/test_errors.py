"""Tests for error types and codes."""

import dataclasses

import pytest

from branchdiff.core.errors import ConfigError, ErrorCode, StructuredError


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize("code", [c for c in ErrorCode if c.name.startswith("CONFIG_")])
    def test_given_config_code_when_checked_then_in_config_range(self, code: ErrorCode) -> None:
        """Config error codes fall within the 2xxx range."""
        assert 2000 <= code.value < 3000

    @pytest.mark.parametrize("code", [c for c in ErrorCode if c.name.startswith("DIFF_")])
    def test_given_diff_code_when_checked_then_in_diff_range(self, code: ErrorCode) -> None:
        """Branch diff error codes fall within the 3xxx range."""
        assert 3000 <= code.value < 4000

    def test_given_all_codes_when_listed_then_unique(self) -> None:
        values = [c.value for c in ErrorCode]
        assert len(values) == len(set(values))


class TestStructuredError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = StructuredError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_includes_code_and_name(self) -> None:
        """String form carries code, name and message."""
        error = StructuredError(code=ErrorCode.CONFIG_INVALID_VALUE, message="bad")
        assert str(error) == "CONFIG_INVALID_VALUE (2002): bad"

    def test_given_error_when_modified_then_frozen(self) -> None:
        """Errors are immutable."""
        error = StructuredError(code=ErrorCode.CONFIG_INVALID_VALUE, message="bad")
        with pytest.raises(dataclasses.FrozenInstanceError):
            error.message = "other"  # type: ignore[misc]


class TestConfigError:
    """Config error factory tests."""

    def test_given_parse_failure_when_created_then_has_path(self) -> None:
        error = ConfigError.parse_failed("/etc/cfg.yaml", "bad indent")
        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/etc/cfg.yaml", "reason": "bad indent"}
        assert "/etc/cfg.yaml" in error.message

    def test_given_invalid_value_when_created_then_value_stringified(self) -> None:
        error = ConfigError.invalid_value("diff.encoding", 42, "Unknown encoding")
        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["value"] == "42"
        assert "diff.encoding" in error.message

    def test_given_missing_file_when_created_then_file_not_found(self) -> None:
        error = ConfigError.missing_file("/nope.yaml")
        assert error.code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert error.error_name == "CONFIG_FILE_NOT_FOUND"

    def test_given_config_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(StructuredError):
            raise ConfigError.missing_file("/nope.yaml")
