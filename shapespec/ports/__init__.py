"""Ports layer - Interfaces consumed and implemented by the specs."""

from .logger import LoggerPort
from .type_spec import ConversionCapability, ElementDescriptor, TypeSpecPort

__all__ = [
    "ConversionCapability",
    "ElementDescriptor",
    "LoggerPort",
    "TypeSpecPort",
]
