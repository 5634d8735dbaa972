"""Central test fixtures."""

import pytest

from depot.repository import (
    CompositeConfiguration,
    InMemoryRepository,
    InMemoryWritableRepository,
)
from depot.testing import RecordingRepository
from tests.fixtures.catalog import HTTP_1, HTTP_2, INSTALLER, LOGGER_1, MONOLOG_3


@pytest.fixture(params=["sequential", "concurrent"])
def config(request) -> CompositeConfiguration:
    """Run composite tests under both fan-out strategies."""
    return CompositeConfiguration(fan_out=request.param)


@pytest.fixture
def vendor_repo() -> InMemoryRepository:
    """A read-only repository with acme packages."""
    return InMemoryRepository([HTTP_1, LOGGER_1, INSTALLER], name="vendor repo")


@pytest.fixture
def index_repo() -> InMemoryRepository:
    """A read-only repository standing in for a remote index."""
    return InMemoryRepository([HTTP_1, HTTP_2, MONOLOG_3], name="index repo")


@pytest.fixture
def installed_repo() -> InMemoryWritableRepository:
    """A writable repository of installed packages."""
    return InMemoryWritableRepository([HTTP_1], name="installed repo")


@pytest.fixture
def recording_vendor(vendor_repo: InMemoryRepository) -> RecordingRepository:
    return RecordingRepository(vendor_repo)


@pytest.fixture
def recording_index(index_repo: InMemoryRepository) -> RecordingRepository:
    return RecordingRepository(index_repo)


@pytest.fixture
def recording_installed(installed_repo: InMemoryWritableRepository) -> RecordingRepository:
    return RecordingRepository(installed_repo)
