"""Errors raised while validating and converting values."""

from typing import Any


class TypeSpecError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, path: str | None = None, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.details = details or {}
        if path is not None:
            self.details["path"] = path


class ShapeMismatchError(TypeSpecError):
    """A value does not have the shape its specification requires."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        expected: str | None = None,
        value: Any = None,
    ):
        super().__init__(message, path=path)
        self.expected = expected
        self.value = value
        if expected:
            self.details["expected"] = expected


class MissingRequiredPropertyError(ShapeMismatchError):
    """A composite value lacks a property declared as required."""

    def __init__(self, message: str, path: str | None = None, property_name: str | None = None):
        super().__init__(message, path=path, expected="a value")
        self.property_name = property_name
        if property_name:
            self.details["property_name"] = property_name


class MissingTypeDefinitionError(TypeSpecError):
    """A named type could not be resolved through the composite spec dictionary."""

    def __init__(self, message: str, type_name: str, path: str | None = None):
        super().__init__(message, path=path)
        self.type_name = type_name
        self.details["type_name"] = type_name
