"""Domain layer - Value objects, enums and errors shared by every spec."""

from .enums import ConversionDirection, LogLevel, SpecType
from .exceptions import (
    MissingRequiredPropertyError,
    MissingTypeDefinitionError,
    ShapeMismatchError,
    TypeSpecError,
)
from .property_path import PropertyPath

__all__ = [
    # Enums
    "ConversionDirection",
    "LogLevel",
    # Exceptions
    "MissingRequiredPropertyError",
    "MissingTypeDefinitionError",
    # Value objects
    "PropertyPath",
    "ShapeMismatchError",
    "SpecType",
    "TypeSpecError",
]
