from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .stability import Stability, parse_stability


class Package(BaseModel):
    """A single version of a package as published by a repository.

    Repositories and the composite repository pass packages around without
    inspecting them beyond name and version. Packages are immutable and
    compare by value.

    Examples:
        >>> package = Package(name="Acme/Http", version="1.2.0")
        >>> package.name
        'acme/http'
        >>> package.unique_name
        'acme/http-1.2.0'

    Attributes:
        name: Lower-cased package name, usually ``vendor/project``.
        version: Normalized version string.
        pretty_version: Version as originally written. Defaults to ``version``.
        type: Package type, used to filter search results.
        description: Free-text description, searched in full-text mode.
        keywords: Extra search terms.
        provides: Names of virtual packages this package provides.
        abandoned: Whether the maintainer marked the package as abandoned.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    pretty_version: str = ""
    type: str = "library"
    description: str = ""
    keywords: tuple[str, ...] = ()
    provides: tuple[str, ...] = ()
    abandoned: bool = False

    @field_validator("name")
    @classmethod
    def _lower_name(cls, value: str) -> str:
        return value.lower()

    @model_validator(mode="before")
    @classmethod
    def _default_pretty_version(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("pretty_version"):
            data = {**data, "pretty_version": data.get("version", "")}
        return data

    @property
    def stability(self) -> Stability:
        return parse_stability(self.version)

    @property
    def unique_name(self) -> str:
        return f"{self.name}-{self.version}"

    def __str__(self) -> str:
        return f"{self.name} {self.pretty_version}"
