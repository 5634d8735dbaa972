import logging
from collections.abc import Iterable
from functools import partial

from ..domain import Constraint, LoadResult, Package, ProviderInfo, SearchMode, SearchResult
from .base import LoadedMap, PackageMap, Repository, StabilityMap
from .config import CompositeConfiguration

LOGGER = logging.getLogger(__name__)


class CompositeRepository(Repository):
    """Presents several repositories as a single one.

    Every query is sent to each member repository in insertion order and the
    partial results are merged:

    - ``has_package`` and ``find_package`` stop at the first member that
      answers, so member order is priority order.
    - ``find_packages``, ``search``, ``get_packages`` and ``get_providers``
      concatenate member results without removing duplicates.
    - ``load_packages`` concatenates packages but lists each found name once.
    - ``count`` adds up the member counts.

    Composite repositories never nest. Adding a composite repository adds its
    members in its place, so ``repositories`` only ever holds leaf
    repositories.

    Member failures are not caught: the first exception raised by a member
    propagates unchanged and the remaining members are not queried.

    Examples:
        >>> installed = InMemoryWritableRepository(name="installed repo")
        >>> repo = CompositeRepository([installed, CompositeRepository([vcs, index])])
        >>> [r.repo_name for r in repo.repositories]
        ['installed repo', 'vcs repo', 'index repo']
        >>> await repo.find_package("acme/http", "1.2.0")  # installed wins
    """

    __slots__ = ("_repositories", "config")

    def __init__(
        self,
        repositories: Iterable[Repository] = (),
        config: CompositeConfiguration | None = None,
    ):
        self.config = config or CompositeConfiguration()
        self._repositories: list[Repository] = []
        for repository in repositories:
            self.add_repository(repository)

    @property
    def repo_name(self) -> str:
        return "composite repo ({})".format(", ".join(r.repo_name for r in self._repositories))

    @property
    def repositories(self) -> list[Repository]:
        """The member repositories, in insertion order."""
        return self._repositories

    def get_repositories(self) -> list[Repository]:
        return self._repositories

    def add_repository(self, repository: Repository) -> None:
        """Add a repository, flattening composite repositories into their members."""
        if isinstance(repository, CompositeRepository):
            LOGGER.debug(
                "Flattening composite repository",
                extra={"member_count": len(repository.repositories)},
            )
            # Iterate a copy: the composite may be this repository itself.
            for member in list(repository.repositories):
                self.add_repository(member)
        else:
            self._repositories.append(repository)

    async def has_package(self, package: Package) -> bool:
        self._log("has_package")
        found = await self.config.strategy.first(
            [partial(r.has_package, package) for r in self._repositories],
            lambda result: result,
        )
        return bool(found)

    async def find_package(
        self, name: str, constraint: "Constraint | str | None"
    ) -> Package | None:
        self._log("find_package")
        return await self.config.strategy.first(
            [partial(r.find_package, name, constraint) for r in self._repositories],
            lambda result: result is not None,
        )

    async def find_packages(
        self, name: str, constraint: "Constraint | str | None" = None
    ) -> list[Package]:
        self._log("find_packages")
        results = await self.config.strategy.gather(
            [partial(r.find_packages, name, constraint) for r in self._repositories]
        )
        return _concat(results)

    async def load_packages(
        self,
        package_map: PackageMap,
        acceptable_stabilities: StabilityMap,
        stability_flags: StabilityMap,
        already_loaded: LoadedMap | None = None,
    ) -> LoadResult:
        self._log("load_packages")
        results = await self.config.strategy.gather(
            [
                partial(
                    r.load_packages,
                    package_map,
                    acceptable_stabilities,
                    stability_flags,
                    already_loaded,
                )
                for r in self._repositories
            ]
        )

        # Packages keep duplicates; names are listed once, first occurrence first.
        names_found = dict.fromkeys(name for result in results for name in result.names_found)
        return LoadResult(
            packages=_concat(result.packages for result in results),
            names_found=list(names_found),
        )

    async def search(
        self, query: str, mode: SearchMode = SearchMode.FULLTEXT, type: str | None = None
    ) -> list[SearchResult]:
        self._log("search")
        results = await self.config.strategy.gather(
            [partial(r.search, query, mode, type) for r in self._repositories]
        )
        return _concat(results)

    async def get_packages(self) -> list[Package]:
        self._log("get_packages")
        results = await self.config.strategy.gather(
            [r.get_packages for r in self._repositories]
        )
        return _concat(results)

    async def get_providers(self, package_name: str) -> list[ProviderInfo]:
        self._log("get_providers")
        results = await self.config.strategy.gather(
            [partial(r.get_providers, package_name) for r in self._repositories]
        )
        return _concat(results)

    async def remove_package(self, package: Package) -> int:
        """Remove a package from every writable member.

        Members without the writable capability are skipped. Removal is not
        transactional: if a member fails, earlier members keep their removal.

        Returns:
            The number of members the removal was sent to.
        """
        self._log("remove_package")
        removed_from = 0
        for repository in self._repositories:
            writable = repository.as_writable()
            if writable is None:
                LOGGER.debug(
                    "Skipping read-only repository",
                    extra={"repository": repository.repo_name},
                )
                continue
            await writable.remove_package(package)
            removed_from += 1
        return removed_from

    async def count(self) -> int:
        self._log("count")
        counts = await self.config.strategy.gather([r.count for r in self._repositories])
        return sum(counts)

    def _log(self, operation: str) -> None:
        LOGGER.log(
            self.config.level,
            "Fanning out repository query",
            extra={"operation": operation, "member_count": len(self._repositories)},
        )


def _concat(parts: Iterable[list]) -> list:
    return [item for part in parts for item in part]
