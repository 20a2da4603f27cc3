"""Options object threaded through every conversion call."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain.enums import ConversionDirection, LogLevel
from ..ports.logger import LoggerPort
from ..ports.type_spec import ConversionCapability


class SerializationOptions(BaseModel):
    """Strongly-typed, read-only configuration for a conversion.

    Options are passed explicitly on every call instead of living in a
    module-level singleton, so concurrent conversions using different
    options cannot interfere with each other.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    # Strictness
    serialization_strict_type_checking: bool = Field(
        default=False,
        description="Raise instead of warn when a value to serialize has the wrong shape",
    )
    deserialization_strict_type_checking: bool = Field(
        default=False,
        description="Raise instead of warn when a value to deserialize has the wrong shape",
    )

    # Named types
    composite_spec_dictionary: dict[str, ConversionCapability] | None = Field(
        default=None,
        description="Specs that element and property descriptors may refer to by name",
    )

    # Diagnostics
    logger: LoggerPort | None = Field(
        default=None,
        description="Sink for validation diagnostics; nothing is recorded when absent",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Least severe level forwarded to the logger",
    )

    def is_strict(self, direction: ConversionDirection) -> bool:
        """Return the strictness flag for ``direction``."""
        if direction is ConversionDirection.SERIALIZE:
            return self.serialization_strict_type_checking
        return self.deserialization_strict_type_checking

    def lookup(self, type_name: str) -> ConversionCapability | None:
        """Find a named spec, or ``None`` when it is not registered."""
        if not self.composite_spec_dictionary:
            return None
        return self.composite_spec_dictionary.get(type_name)


DEFAULT_OPTIONS = SerializationOptions()
