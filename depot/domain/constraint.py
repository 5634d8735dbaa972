"""Version constraints as seen by repositories.

Range and operator matching belong to the resolver; repositories only need a
``matches`` predicate. The two implementations here cover "any version" and
an exact version.
"""

from abc import ABC, abstractmethod


class Constraint(ABC):
    @abstractmethod
    def matches(self, version: str) -> bool: ...


class MatchAllConstraint(Constraint):
    def matches(self, version: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "MatchAllConstraint()"


class VersionConstraint(Constraint):
    """Matches a single version, compared case-insensitively with a leading ``v`` ignored."""

    def __init__(self, version: str):
        self.version = _normalize(version)

    def matches(self, version: str) -> bool:
        return _normalize(version) == self.version

    def __repr__(self) -> str:
        return f"VersionConstraint({self.version!r})"


def _normalize(version: str) -> str:
    version = version.strip().lower()
    if version.startswith("v") and version[1:2].isdigit():
        return version[1:]
    return version


def as_constraint(value: "Constraint | str | None") -> Constraint:
    """Coerce ``None``, ``"*"``, a version string or a constraint into a constraint."""
    if value is None:
        return MatchAllConstraint()
    if isinstance(value, Constraint):
        return value
    if value.strip() in ("", "*"):
        return MatchAllConstraint()
    return VersionConstraint(value)
