"""Diagnostic messages and the logging helper used by every spec."""

from __future__ import annotations

import json
from typing import Any

from ..domain.enums import LogLevel
from ..domain.property_path import PropertyPath
from .serialization_options import SerializationOptions


def describe_value(value: Any) -> str:
    """Render a value for a diagnostic message."""
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return repr(value)


def validation_error_message(path: PropertyPath, value: Any, expected: str) -> str:
    """Message for a shape mismatch that fails the conversion."""
    return f"expected {expected} at {path}, found {describe_value(value)}"


def validation_warning_message(path: PropertyPath, value: Any, expected: str) -> str:
    """Message for a shape mismatch that is passed through unchanged."""
    return f"expected {expected} at {path}, found {describe_value(value)}"


def missing_type_definition_message(type_name: str, path: PropertyPath) -> str:
    return (
        "Missing composite specification entry in composite type dictionary for type "
        f'named "{type_name}" at property {path}.'
    )


def missing_property_message(property_name: str, path: PropertyPath) -> str:
    return f'missing required property "{property_name}" at {path}'


def log(options: SerializationOptions | None, level: LogLevel, message: str, **kwargs: Any) -> None:
    """Forward ``message`` to the logger configured in ``options``.

    Does nothing when there are no options, no logger, or ``level`` is
    below ``options.log_level``.
    """
    if options is None or options.logger is None:
        return
    if level < options.log_level:
        return

    logger = options.logger
    if level is LogLevel.ERROR:
        logger.error(message, **kwargs)
    elif level is LogLevel.WARNING:
        logger.warning(message, **kwargs)
    elif level is LogLevel.INFO:
        logger.info(message, **kwargs)
    else:
        logger.debug(message, **kwargs)
