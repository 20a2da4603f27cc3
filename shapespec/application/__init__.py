"""Application layer - The type specifications and their options."""

from .base_spec import BaseTypeSpec, resolve_type_spec
from .composite_spec import CompositeTypeSpec, PropertySpec
from .dictionary_spec import DictionaryTypeSpec
from .primitive_specs import (
    AnyTypeSpec,
    BooleanTypeSpec,
    DateTimeTypeSpec,
    NumberTypeSpec,
    StringTypeSpec,
)
from .sequence_spec import SequenceTypeSpec
from .serialization_options import DEFAULT_OPTIONS, SerializationOptions

__all__ = [
    "DEFAULT_OPTIONS",
    "AnyTypeSpec",
    "BaseTypeSpec",
    "BooleanTypeSpec",
    "CompositeTypeSpec",
    "DateTimeTypeSpec",
    "DictionaryTypeSpec",
    "NumberTypeSpec",
    "PropertySpec",
    "SequenceTypeSpec",
    "SerializationOptions",
    "StringTypeSpec",
    "resolve_type_spec",
]
