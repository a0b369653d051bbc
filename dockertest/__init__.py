"""Disposable Docker containers for integration tests.

Usage:
    from dockertest import setup_mysql

    mysql = setup_mysql()
    try:
        run_tests_against(mysql.url)
    finally:
        mysql.teardown()
"""

from ._version import __version__
from .models import (
    ContainerCreationError,
    DockerTestError,
    MigrationError,
    MigrationOptions,
    MySQLOptions,
    MySQLStartError,
    PortBinding,
)
from .services.container import DockerContainer
from .services.mysql import (
    MySQLContainer,
    load_mysql_options,
    new_mysql_container,
    run_migration_container,
    setup_mysql,
    to_mysql_connection_string,
)

__all__ = [
    "__version__",
    "DockerContainer",
    "MySQLContainer",
    "MySQLOptions",
    "MigrationOptions",
    "PortBinding",
    "setup_mysql",
    "new_mysql_container",
    "run_migration_container",
    "load_mysql_options",
    "to_mysql_connection_string",
    "DockerTestError",
    "ContainerCreationError",
    "MySQLStartError",
    "MigrationError",
]
