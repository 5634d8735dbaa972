"""Result types returned by repository queries."""

from dataclasses import dataclass, field
from enum import IntEnum

from pydantic import BaseModel

from .package import Package


class SearchMode(IntEnum):
    FULLTEXT = 0
    NAME = 1
    VENDOR = 2


class SearchResult(BaseModel):
    name: str
    description: str = ""
    abandoned: bool = False


class ProviderInfo(BaseModel):
    """A package that provides a (usually virtual) package name."""

    name: str
    description: str = ""
    type: str = "library"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a bulk load.

    Attributes:
        packages: Packages loaded, in repository order. The same package may
            appear more than once when several repositories return it.
        names_found: Requested names that at least one repository knows,
            each listed once.
    """

    packages: list[Package] = field(default_factory=list)
    names_found: list[str] = field(default_factory=list)
