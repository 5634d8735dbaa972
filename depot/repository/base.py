from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Optional

from ..domain import Constraint, LoadResult, Package, ProviderInfo, SearchMode, SearchResult

PackageMap = Mapping[str, "Constraint | None"]
StabilityMap = Mapping[str, int]
LoadedMap = Mapping[str, Mapping[str, Package]]


class Repository(ABC):
    """Read capability shared by every package source.

    A repository answers queries about the packages it knows. All queries are
    coroutines because most sources sit behind a filesystem, a VCS checkout or
    a remote index.

    Whether a repository can also be mutated is decided by ``as_writable``,
    which returns ``None`` here and the repository itself for
    ``WritableRepository`` implementations.
    """

    __slots__ = ()

    @property
    def repo_name(self) -> str:
        """Human readable label, used for diagnostics only."""
        return type(self).__name__

    def as_writable(self) -> Optional["WritableRepository"]:
        return None

    @abstractmethod
    async def has_package(self, package: Package) -> bool:
        """Check whether this exact package (name and version) is in the repository."""
        ...

    @abstractmethod
    async def find_package(
        self, name: str, constraint: "Constraint | str | None"
    ) -> Package | None:
        """Find one package matching the name and constraint.

        Returns:
            The first matching package, or None when nothing matches.
        """
        ...

    @abstractmethod
    async def find_packages(
        self, name: str, constraint: "Constraint | str | None" = None
    ) -> list[Package]:
        """Find every package matching the name and, if given, the constraint."""
        ...

    @abstractmethod
    async def load_packages(
        self,
        package_map: PackageMap,
        acceptable_stabilities: StabilityMap,
        stability_flags: StabilityMap,
        already_loaded: LoadedMap | None = None,
    ) -> LoadResult:
        """Load packages for several names at once.

        Args:
            package_map: Package name to constraint (None matches any version).
            acceptable_stabilities: Stability names allowed by default, keyed
                by name with the ``Stability`` value as value.
            stability_flags: Per package name overrides, the least stable
                ``Stability`` value allowed for that name.
            already_loaded: Package name to {version: package} of packages the
                caller already holds. These are not returned again.

        Returns:
            The packages loaded and the requested names this repository knows.
        """
        ...

    @abstractmethod
    async def search(
        self, query: str, mode: SearchMode = SearchMode.FULLTEXT, type: str | None = None
    ) -> list[SearchResult]: ...

    @abstractmethod
    async def get_packages(self) -> list[Package]: ...

    @abstractmethod
    async def get_providers(self, package_name: str) -> list[ProviderInfo]:
        """List packages that provide ``package_name``."""
        ...

    @abstractmethod
    async def count(self) -> int: ...


class WritableRepository(Repository):
    """Repository that packages can be added to and removed from."""

    __slots__ = ()

    def as_writable(self) -> "WritableRepository":
        return self

    @abstractmethod
    async def add_package(self, package: Package) -> None: ...

    @abstractmethod
    async def remove_package(self, package: Package) -> None: ...
