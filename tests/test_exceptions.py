"""Tests for the exception hierarchy and error handling helpers."""

import logging

import pytest
from pydantic import ValidationError

from switchboard.exceptions import (
    BindingFieldMissingError,
    ConfigFileInvalidError,
    ConfigurationError,
    ErrorContext,
    ExecutionError,
    ExpansionMismatchError,
    NoDeviceSelectedError,
    SwitchboardError,
    UnknownBindingError,
    collect_errors,
    describe_validation_error,
    format_error_for_display,
    wrap_pydantic_error,
)
from switchboard.models import ConfigControl, FrameworkConfig


@pytest.mark.unit
class TestSwitchboardError:
    """Test the base exception contract."""

    def test_messages(self):
        error = SwitchboardError("Short", technical_message="Long", recovery_hint="Do this")

        assert str(error) == "Short"
        assert error.msg == "Short"
        assert error.technical_message == "Long"
        assert error.get_full_message() == "Short\n\nSuggestion: Do this"

    def test_technical_message_defaults_to_user_message(self):
        assert SwitchboardError("Only").technical_message == "Only"

    def test_binding_errors_are_configuration_errors(self):
        assert isinstance(BindingFieldMissingError("class"), ConfigurationError)
        assert isinstance(UnknownBindingError("x"), ConfigurationError)

    def test_expansion_mismatch_details(self):
        error = ExpansionMismatchError("AIN#(0:1)", "ain-#(0:2)", 2, 3)

        assert error.user_message == "Unexpected range expansion mismatch"
        assert "2" in error.technical_message and "3" in error.technical_message

    def test_execution_error_keeps_original(self):
        original = RuntimeError("boom")
        error = ExecutionError("refresh", original)

        assert error.event_name == "refresh"
        assert error.original_error is original
        assert not error.recoverable

    def test_format_for_display(self):
        assert format_error_for_display(NoDeviceSelectedError("DAC0"))[0] == "No device selected"
        assert format_error_for_display(ValueError("bad")) == ("ValueError: bad", None)


@pytest.mark.unit
class TestErrorContext:
    """Test ErrorContext."""

    def test_re_raises_by_default(self):
        with pytest.raises(ValueError):
            with ErrorContext("do thing"):
                raise ValueError("bad")

    def test_suppresses_and_records(self, caplog):
        with caplog.at_level(logging.ERROR):
            with ErrorContext("do thing", re_raise=False) as ctx:
                raise ValueError("bad")

        assert isinstance(ctx.error, ValueError)
        assert "Failed to do thing" in caplog.text


@pytest.mark.unit
class TestErrorCollector:
    """Test ErrorCollector."""

    def test_collects_raised_and_reported_errors(self):
        collector = collect_errors("load")

        with collector.try_operation("first"):
            pass
        with collector.try_operation("second"):
            raise UnknownBindingError("x")
        with collector.try_operation("third") as op:
            op.fail(BindingFieldMissingError("event"))
        collector.add_error("fourth", ValueError("bad"))

        assert collector.success_count == 1
        assert collector.error_count == 3
        summary = collector.get_summary()
        assert "Failed 3 of 4 operations" in summary
        assert "second: No binding for x" in summary
        assert "fourth: bad" in summary

    def test_summary_without_errors(self):
        collector = collect_errors("load")
        with collector.try_operation("only"):
            pass

        assert not collector.has_errors
        assert collector.get_summary() == "All operations completed successfully (1 total)"

    def test_listener_records_fired_errors(self, framework):
        collector = collect_errors("load module")
        framework.on("load_error", collector.listener("analog_inputs"))

        framework.delete_config_binding("missing")

        assert collector.error_count == 1
        assert "analog_inputs: No binding for missing" in collector.get_summary()


@pytest.mark.unit
class TestDescribeValidationError:
    """Test reduction of pydantic errors."""

    def test_single_error(self):
        with pytest.raises(ValidationError) as exc_info:
            FrameworkConfig(refresh_rate=0)

        field, value, message = describe_validation_error(exc_info.value)

        assert field == "refresh_rate"
        assert value == 0
        assert "greater than 0" in message

    def test_multiple_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            ConfigControl.model_validate({})

        field, value, message = describe_validation_error(exc_info.value)

        assert field == "multiple fields"
        assert value is None
        assert message.startswith("2 validation errors")

    def test_wrap_json_syntax_error(self):
        with pytest.raises(ValidationError) as exc_info:
            FrameworkConfig.model_validate_json('{"refresh_rate": 5,}')

        assert isinstance(wrap_pydantic_error(exc_info.value, "config.json"), ConfigFileInvalidError)
