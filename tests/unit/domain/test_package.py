"""Tests for the Package model and result types."""

import pytest
from pydantic import ValidationError

from depot.domain import LoadResult, Package, Stability


def test_package_name_is_lower_cased():
    package = Package(name="Acme/Http", version="1.0.0")
    assert package.name == "acme/http"


def test_package_pretty_version_defaults_to_version():
    """Verify pretty_version falls back to the version when not given."""
    assert Package(name="acme/http", version="1.0.0").pretty_version == "1.0.0"
    assert Package(name="acme/http", version="1.0.0.0", pretty_version="v1.0").pretty_version == "v1.0"


def test_package_unique_name_and_stability():
    package = Package(name="acme/http", version="2.0.0-beta1")
    assert package.unique_name == "acme/http-2.0.0-beta1"
    assert package.stability is Stability.BETA


def test_package_is_immutable_and_compares_by_value():
    """Verify packages are frozen value objects."""
    package = Package(name="acme/http", version="1.0.0")
    assert package == Package(name="acme/http", version="1.0.0")
    assert len({package, Package(name="acme/http", version="1.0.0")}) == 1
    with pytest.raises(ValidationError):
        package.version = "2.0.0"


def test_load_result_defaults_are_empty():
    result = LoadResult()
    assert result.packages == []
    assert result.names_found == []
