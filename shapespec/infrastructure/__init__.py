"""Infrastructure layer - Concrete logger adapters."""

from .in_memory_logger import InMemoryLogger, LogEntry
from .simple_logger import SimpleLogger

__all__ = ["InMemoryLogger", "LogEntry", "SimpleLogger"]
