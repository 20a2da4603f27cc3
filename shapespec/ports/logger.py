"""Logger port for conversion diagnostics."""

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Abstract interface for the diagnostics sink.

    Specs report validation problems through this port. Whether a message
    is actually recorded never changes the outcome of a conversion.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        ...
