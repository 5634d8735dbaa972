"""Sample packages shared by the repository tests."""

from depot.domain import Package

HTTP_1 = Package(name="acme/http", version="1.0.0", description="HTTP client", keywords=("psr-18",))
HTTP_2 = Package(name="acme/http", version="2.0.0", description="HTTP client")
HTTP_3_BETA = Package(name="acme/http", version="3.0.0-beta1", description="HTTP client")
HTTP_DEV = Package(name="acme/http", version="dev-main", description="HTTP client")
LOGGER_1 = Package(
    name="acme/logger",
    version="1.4.0",
    description="Structured logging",
    provides=("psr/log-implementation",),
)
MONOLOG_3 = Package(
    name="monolog/monolog",
    version="3.5.0",
    description="Sends your logs to files, sockets and databases",
    provides=("psr/log-implementation",),
)
INSTALLER = Package(
    name="acme/installer",
    version="0.9.0",
    type="composer-plugin",
    description="Custom installer for acme packages",
    abandoned=True,
)

STABLE_ONLY = {"stable": 0}
