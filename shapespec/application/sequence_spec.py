"""Sequence type specification.

Validates that a value is array-shaped and converts each element with a
delegate spec, which may be given inline or by name.
"""

from __future__ import annotations

from typing import Any

from ..domain.enums import ConversionDirection, SpecType
from ..domain.property_path import PropertyPath
from ..ports.type_spec import ElementDescriptor
from .base_spec import BaseTypeSpec, convert_with, resolve_type_spec
from .serialization_options import SerializationOptions


class SequenceTypeSpec(BaseTypeSpec):
    """A type specification for a sequence of elements.

    Args:
        element_spec: Spec for every element, or the name of one in the
            options' composite spec dictionary. Names are resolved at
            conversion time, so a composite may contain a sequence of itself.

    Example:
        >>> numbers = SequenceTypeSpec(NumberTypeSpec())
        >>> numbers.serialize(PropertyPath.root(), [1, 2, 3])
        [1, 2, 3]
    """

    expected = "an Array"

    def __init__(self, element_spec: ElementDescriptor):
        self._element_spec = element_spec

    @property
    def spec_type(self) -> SpecType:
        return SpecType.SEQUENCE

    @property
    def element_spec(self) -> ElementDescriptor:
        """The inline element spec or the element type name."""
        return self._element_spec

    def _convert(
        self,
        direction: ConversionDirection,
        path: PropertyPath,
        value: Any,
        options: SerializationOptions | None,
    ) -> Any:
        if not isinstance(value, list | tuple):
            return self.reject(direction, path, value, options, self.expected)

        element_spec = resolve_type_spec(self._element_spec, path, options)

        result: list[Any] = []
        for index, element in enumerate(value):
            element_path = path.extend(index)
            result.append(convert_with(element_spec, direction, element_path, element, options))
        return result

    def __repr__(self) -> str:
        return f"SequenceTypeSpec({self._element_spec!r})"
