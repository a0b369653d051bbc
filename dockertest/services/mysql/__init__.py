"""MySQL test servers.

- options.py: option loading and connection strings
- database.py: creating and dropping the test database
- health.py: readiness checks
- container.py: MySQLContainer
- provision.py: setup_mysql entry point
- migration.py: running migration images
"""

from .container import MySQLContainer, new_mysql_container
from .database import create_mysql_database, drop_mysql_database
from .health import new_mysql_health_checker, update_mysql_container_host
from .migration import run_migration_container
from .options import DEFAULT_MYSQL_OPTIONS, load_mysql_options, to_mysql_connection_string
from .provision import setup_mysql

__all__ = [
    "MySQLContainer",
    "new_mysql_container",
    "setup_mysql",
    "run_migration_container",
    "DEFAULT_MYSQL_OPTIONS",
    "load_mysql_options",
    "to_mysql_connection_string",
    "new_mysql_health_checker",
    "update_mysql_container_host",
    "create_mysql_database",
    "drop_mysql_database",
]
