"""Value types exchanged with repositories."""

from .constraint import Constraint, MatchAllConstraint, VersionConstraint, as_constraint
from .package import Package
from .results import LoadResult, ProviderInfo, SearchMode, SearchResult
from .stability import Stability, parse_stability

__all__ = [
    "Constraint",
    "LoadResult",
    "MatchAllConstraint",
    "Package",
    "ProviderInfo",
    "SearchMode",
    "SearchResult",
    "Stability",
    "VersionConstraint",
    "as_constraint",
    "parse_stability",
]
