"""Leaf type specifications for scalar values."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..domain.enums import ConversionDirection, SpecType
from ..domain.property_path import PropertyPath
from .base_spec import BaseTypeSpec
from .serialization_options import SerializationOptions


class NumberTypeSpec(BaseTypeSpec):
    """Integers and floats; booleans are rejected."""

    expected = "a number"

    @property
    def spec_type(self) -> SpecType:
        return SpecType.NUMBER

    def _convert(
        self,
        direction: ConversionDirection,
        path: PropertyPath,
        value: Any,
        options: SerializationOptions | None,
    ) -> Any:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return self.reject(direction, path, value, options, self.expected)
        return value


class StringTypeSpec(BaseTypeSpec):
    expected = "a string"

    @property
    def spec_type(self) -> SpecType:
        return SpecType.STRING

    def _convert(
        self,
        direction: ConversionDirection,
        path: PropertyPath,
        value: Any,
        options: SerializationOptions | None,
    ) -> Any:
        if not isinstance(value, str):
            return self.reject(direction, path, value, options, self.expected)
        return value


class BooleanTypeSpec(BaseTypeSpec):
    expected = "a boolean"

    @property
    def spec_type(self) -> SpecType:
        return SpecType.BOOLEAN

    def _convert(
        self,
        direction: ConversionDirection,
        path: PropertyPath,
        value: Any,
        options: SerializationOptions | None,
    ) -> Any:
        if not isinstance(value, bool):
            return self.reject(direction, path, value, options, self.expected)
        return value


class DateTimeTypeSpec(BaseTypeSpec):
    """``datetime`` in memory, ISO-8601 string on the wire."""

    @property
    def spec_type(self) -> SpecType:
        return SpecType.DATE_TIME

    def _convert(
        self,
        direction: ConversionDirection,
        path: PropertyPath,
        value: Any,
        options: SerializationOptions | None,
    ) -> Any:
        if direction is ConversionDirection.SERIALIZE:
            if not isinstance(value, datetime):
                return self.reject(direction, path, value, options, "a datetime")
            return value.isoformat()

        if not isinstance(value, str):
            return self.reject(direction, path, value, options, "an ISO-8601 date string")
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return self.reject(direction, path, value, options, "an ISO-8601 date string")


class AnyTypeSpec(BaseTypeSpec):
    """Accepts every value and returns it unchanged."""

    @property
    def spec_type(self) -> SpecType:
        return SpecType.ANY

    def _convert(
        self,
        direction: ConversionDirection,
        path: PropertyPath,
        value: Any,
        options: SerializationOptions | None,
    ) -> Any:
        return value
