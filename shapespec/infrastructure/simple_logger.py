"""Logger adapter over the standard ``logging`` module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

CONTEXT_ATTRIBUTE = "shapespec_context"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class ContextFormatter(logging.Formatter):
    """Formatter that appends the diagnostic context, e.g. ``[path=items.1]``."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = getattr(record, CONTEXT_ATTRIBUTE, None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
            text = f"{text} [{pairs}]"
        return text


class SimpleLogger(LoggerPort):
    """Diagnostics sink writing to a standard library logger.

    Keyword arguments passed by the specs (``path``, ``type_name``) are kept
    together in one ``shapespec_context`` record attribute, so they can never
    collide with built-in ``LogRecord`` attributes.
    """

    def __init__(self, name: str = "shapespec", level: str | int = "info"):
        """Initialize the logger.

        Args:
            name: Logger name (default: "shapespec")
            level: Threshold as a ``LogLevel`` value ("debug" ... "error")
                or a ``logging`` level number
        """
        self._logger = logging.getLogger(name)
        if isinstance(level, str):
            level = _LEVELS[getattr(level, "value", level)]
        self._logger.setLevel(level)

        # Add console handler if not already present
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                ContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            self._logger.addHandler(handler)

    def _emit(self, level: str, message: str, context: dict[str, Any]) -> None:
        self._logger.log(_LEVELS[level], message, extra={CONTEXT_ATTRIBUTE: context})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit("debug", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, kwargs)
