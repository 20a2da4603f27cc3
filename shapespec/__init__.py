"""shapespec - Composable type specifications for converting wire values."""

from .application import (
    AnyTypeSpec,
    BooleanTypeSpec,
    CompositeTypeSpec,
    DateTimeTypeSpec,
    DictionaryTypeSpec,
    NumberTypeSpec,
    PropertySpec,
    SequenceTypeSpec,
    SerializationOptions,
    StringTypeSpec,
)
from .domain import (
    MissingRequiredPropertyError,
    MissingTypeDefinitionError,
    PropertyPath,
    ShapeMismatchError,
    TypeSpecError,
)
from .ports import ConversionCapability, LoggerPort, TypeSpecPort

__all__ = [
    "AnyTypeSpec",
    "BooleanTypeSpec",
    "CompositeTypeSpec",
    "ConversionCapability",
    "DateTimeTypeSpec",
    "DictionaryTypeSpec",
    "LoggerPort",
    "MissingRequiredPropertyError",
    "MissingTypeDefinitionError",
    "NumberTypeSpec",
    "PropertyPath",
    "PropertySpec",
    "SequenceTypeSpec",
    "SerializationOptions",
    "ShapeMismatchError",
    "StringTypeSpec",
    "TypeSpecError",
    "TypeSpecPort",
]
__version__ = "0.1.0"
