"""Depot - aggregate package repositories for dependency management.

This module provides the public API for querying several package sources
as a single repository.
"""

from .domain import (
    Constraint,
    LoadResult,
    MatchAllConstraint,
    Package,
    ProviderInfo,
    SearchMode,
    SearchResult,
    Stability,
    VersionConstraint,
)
from .repository import (
    CompositeConfiguration,
    CompositeRepository,
    InMemoryRepository,
    InMemoryWritableRepository,
    Repository,
    WritableRepository,
)

__all__ = [
    # Repositories
    "CompositeConfiguration",
    "CompositeRepository",
    "InMemoryRepository",
    "InMemoryWritableRepository",
    "Repository",
    "WritableRepository",
    # Domain
    "Constraint",
    "LoadResult",
    "MatchAllConstraint",
    "Package",
    "ProviderInfo",
    "SearchMode",
    "SearchResult",
    "Stability",
    "VersionConstraint",
]
