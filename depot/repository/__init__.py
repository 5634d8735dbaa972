"""Repository capability, in-memory sources and the composite repository.

This package provides:
- Repository / WritableRepository: the read and mutation capabilities
- InMemoryRepository / InMemoryWritableRepository: list-backed sources
- CompositeRepository: many repositories presented as one
- Fan-out strategies and configuration for the composite repository
"""

from .base import Repository, WritableRepository
from .composite import CompositeRepository
from .config import CompositeConfiguration
from .fanout import ConcurrentFanOut, FanOutStrategy, SequentialFanOut
from .memory import InMemoryRepository, InMemoryWritableRepository

__all__ = [
    # Capabilities
    "Repository",
    "WritableRepository",
    # Sources
    "InMemoryRepository",
    "InMemoryWritableRepository",
    # Aggregation
    "CompositeRepository",
    "CompositeConfiguration",
    "FanOutStrategy",
    "SequentialFanOut",
    "ConcurrentFanOut",
]
