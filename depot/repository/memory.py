import re
from collections.abc import Iterable

from ..domain import (
    Constraint,
    LoadResult,
    Package,
    ProviderInfo,
    SearchMode,
    SearchResult,
    as_constraint,
)
from .base import LoadedMap, PackageMap, Repository, StabilityMap, WritableRepository


class InMemoryRepository(Repository):
    """A repository backed by a plain list of packages.

    Useful for tests and for assembling ad-hoc sources in code. Packages are
    kept in insertion order and every query answers in that order.

    Example:
        >>> repo = InMemoryRepository([Package(name="acme/http", version="1.0.0")])
        >>> await repo.find_package("acme/http", "1.0.0")
        Package(name='acme/http', version='1.0.0', ...)
    """

    def __init__(self, packages: Iterable[Package] = (), name: str = "array repo"):
        self.packages: list[Package] = list(packages)
        self._name = name

    @property
    def repo_name(self) -> str:
        return self._name

    async def has_package(self, package: Package) -> bool:
        return any(p.unique_name == package.unique_name for p in self.packages)

    async def find_package(
        self, name: str, constraint: "Constraint | str | None"
    ) -> Package | None:
        for package in self._matching(name, constraint):
            return package
        return None

    async def find_packages(
        self, name: str, constraint: "Constraint | str | None" = None
    ) -> list[Package]:
        return list(self._matching(name, constraint))

    async def load_packages(
        self,
        package_map: PackageMap,
        acceptable_stabilities: StabilityMap,
        stability_flags: StabilityMap,
        already_loaded: LoadedMap | None = None,
    ) -> LoadResult:
        already_loaded = already_loaded or {}
        packages: list[Package] = []
        names_found: dict[str, None] = {}

        for package in self.packages:
            if package.name not in package_map:
                continue
            # A name counts as found even when every version is filtered out.
            names_found[package.name] = None

            if not as_constraint(package_map[package.name]).matches(package.version):
                continue
            if not self._is_acceptable(package, acceptable_stabilities, stability_flags):
                continue
            if package.version in already_loaded.get(package.name, {}):
                continue
            packages.append(package)

        return LoadResult(packages=packages, names_found=list(names_found))

    async def search(
        self, query: str, mode: SearchMode = SearchMode.FULLTEXT, type: str | None = None
    ) -> list[SearchResult]:
        terms = [re.escape(term) for term in query.split()]
        if not terms:
            return []
        pattern = re.compile("|".join(terms), re.IGNORECASE)

        results: dict[str, SearchResult] = {}
        for package in self.packages:
            if type is not None and package.type != type:
                continue
            if package.name in results:
                continue
            if pattern.search(self._searchable_text(package, mode)):
                results[package.name] = SearchResult(
                    name=package.name,
                    description=package.description,
                    abandoned=package.abandoned,
                )
        return list(results.values())

    async def get_packages(self) -> list[Package]:
        return list(self.packages)

    async def get_providers(self, package_name: str) -> list[ProviderInfo]:
        providers: dict[str, ProviderInfo] = {}
        for package in self.packages:
            if package_name in package.provides:
                providers[package.name] = ProviderInfo(
                    name=package.name,
                    description=package.description,
                    type=package.type,
                )
        return list(providers.values())

    async def count(self) -> int:
        return len(self.packages)

    def _matching(self, name: str, constraint: "Constraint | str | None") -> Iterable[Package]:
        name = name.lower()
        matcher = as_constraint(constraint)
        return (p for p in self.packages if p.name == name and matcher.matches(p.version))

    @staticmethod
    def _is_acceptable(
        package: Package,
        acceptable_stabilities: StabilityMap,
        stability_flags: StabilityMap,
    ) -> bool:
        if package.name in stability_flags:
            return package.stability <= stability_flags[package.name]
        return package.stability.name.lower() in acceptable_stabilities

    @staticmethod
    def _searchable_text(package: Package, mode: SearchMode) -> str:
        if mode == SearchMode.NAME:
            return package.name
        if mode == SearchMode.VENDOR:
            return package.name.split("/", 1)[0]
        return " ".join((package.name, package.description, *package.keywords))


class InMemoryWritableRepository(InMemoryRepository, WritableRepository):
    """In-memory repository that also accepts additions and removals."""

    async def add_package(self, package: Package) -> None:
        self.packages.append(package)

    async def remove_package(self, package: Package) -> None:
        self.packages = [p for p in self.packages if p.unique_name != package.unique_name]
