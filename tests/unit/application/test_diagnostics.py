"""Tests for diagnostic messages and the log helper."""

from unittest.mock import Mock

from shapespec.application.diagnostics import (
    describe_value,
    log,
    missing_type_definition_message,
    validation_error_message,
    validation_warning_message,
)
from shapespec.application.serialization_options import SerializationOptions
from shapespec.domain.enums import LogLevel
from shapespec.domain.property_path import PropertyPath
from shapespec.ports.logger import LoggerPort


class TestMessages:
    """Message formatting."""

    def test_validation_messages(self):
        """Test the shape mismatch message format."""
        path = PropertyPath.root().concat(["items", 3])
        assert validation_error_message(path, {"a": 1}, "an Array") == (
            'expected an Array at items.3, found {"a": 1}'
        )
        assert validation_warning_message(path, None, "an Array") == (
            "expected an Array at items.3, found null"
        )

    def test_missing_type_definition_message(self):
        """Test the unresolved name message format."""
        message = missing_type_definition_message("Widget", PropertyPath.root())
        assert message == (
            "Missing composite specification entry in composite type dictionary for type "
            'named "Widget" at property <root>.'
        )

    def test_describe_value_falls_back_to_str(self):
        """Test rendering of values JSON cannot encode."""
        assert describe_value(object) == json_quoted(str(object))
        assert describe_value({1, 2}) in ('"{1, 2}"', '"{2, 1}"')


def json_quoted(text: str) -> str:
    return f'"{text}"'


class TestLog:
    """The log helper."""

    def test_no_options_is_noop(self):
        """Test that logging without options does nothing."""
        log(None, LogLevel.ERROR, "message")

    def test_no_logger_is_noop(self):
        """Test that logging without a logger does nothing."""
        log(SerializationOptions(), LogLevel.ERROR, "message")

    def test_dispatches_by_level(self):
        """Test that each level reaches the matching logger method."""
        logger = Mock(spec=LoggerPort)
        options = SerializationOptions(logger=logger, log_level=LogLevel.DEBUG)

        log(options, LogLevel.ERROR, "e", path="a")
        log(options, LogLevel.WARNING, "w")
        log(options, LogLevel.INFO, "i")
        log(options, LogLevel.DEBUG, "d")

        logger.error.assert_called_once_with("e", path="a")
        logger.warning.assert_called_once_with("w")
        logger.info.assert_called_once_with("i")
        logger.debug.assert_called_once_with("d")

    def test_respects_log_level(self):
        """Test that messages below the configured level are dropped."""
        logger = Mock(spec=LoggerPort)
        options = SerializationOptions(logger=logger, log_level=LogLevel.ERROR)

        log(options, LogLevel.WARNING, "w")
        log(options, LogLevel.ERROR, "e")

        logger.warning.assert_not_called()
        logger.error.assert_called_once_with("e")
