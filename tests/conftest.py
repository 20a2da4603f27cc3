"""Pytest configuration and shared fixtures."""

import pytest

from shapespec.domain.property_path import PropertyPath
from shapespec.infrastructure.in_memory_logger import InMemoryLogger

from tests.builders import OptionsBuilder, RecordingTypeSpec


@pytest.fixture
def root():
    """The empty property path."""
    return PropertyPath.root()


@pytest.fixture
def logger():
    """Logger that records every entry for assertions."""
    return InMemoryLogger()


@pytest.fixture
def recording_spec():
    """Identity delegate spec that records its calls."""
    return RecordingTypeSpec()


@pytest.fixture
def lenient_options(logger):
    """Options with strict checking disabled in both directions."""
    return OptionsBuilder().with_logger(logger).build()


@pytest.fixture
def strict_options(logger):
    """Options with strict checking enabled in both directions."""
    return OptionsBuilder().strict().with_logger(logger).build()
