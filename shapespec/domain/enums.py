"""Domain enums for type safety and consistency.

This module centralizes the enumeration types used across the package,
preventing string literal errors when tagging specs, picking a conversion
direction or choosing a log severity.
"""

from enum import Enum


class ConversionDirection(str, Enum):
    """Direction of a conversion between the in-memory and wire shapes."""

    SERIALIZE = "serialize"  # in-memory value -> wire value
    DESERIALIZE = "deserialize"  # wire value -> in-memory value


class LogLevel(str, Enum):
    """Severity levels understood by the diagnostics helpers."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def severity(self) -> int:
        """Position in the order DEBUG < INFO < WARNING < ERROR."""
        return [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR].index(self)

    # str defines every rich comparison; all four are overridden.
    def __lt__(self, other: "LogLevel") -> bool:
        """Enable severity comparison."""
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity >= other.severity


class SpecType(str, Enum):
    """Shape category reported by a type specification."""

    SEQUENCE = "Sequence"
    DICTIONARY = "Dictionary"
    COMPOSITE = "Composite"
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    DATE_TIME = "DateTime"
    ANY = "Any"
