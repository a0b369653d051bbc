"""Readiness checks for MySQL containers."""

import structlog

from ...config import settings
from ...models.container import ContainerCallback
from ...models.mysql import MySQLOptions
from ...utils.environment import is_inside_container
from ...utils.retry import retry
from ..container.container import DockerContainer
from .database import create_database_statement, execute_statement
from .options import to_mysql_connection_string

logger = structlog.get_logger(__name__)


def update_mysql_container_host(container: DockerContainer, options: MySQLOptions) -> None:
    """Point ``options.host`` at the server for the current environment.

    Inside a container the server is reached through its bridge network
    address. On the host the configured address (127.0.0.1 by default, or
    TEST_MYSQL_HOST) is kept since the server port is published there.
    """
    if is_inside_container():
        options.host = container.ip_address()


def new_mysql_health_checker(options: MySQLOptions) -> ContainerCallback:
    """Return a callback that blocks until the MySQL server accepts queries.

    The server counts as ready once ``CREATE DATABASE IF NOT EXISTS`` for the
    configured database succeeds. Attempts and delay come from the
    ``test_mysql_ready_*`` settings; the last error is raised when the server
    never becomes ready.
    """
    options = options.copy()

    def check(container: DockerContainer) -> None:
        update_mysql_container_host(container, options)
        server_url = to_mysql_connection_string(options.copy(database=""))
        statement = create_database_statement(options.database)
        mysql_settings = settings.mysql

        logger.info(
            "Waiting for MySQL to become ready",
            host=options.host,
            port=options.port,
            attempts=mysql_settings.ready_attempts,
        )
        retry(
            mysql_settings.ready_attempts,
            mysql_settings.ready_delay,
            lambda: execute_statement(server_url, statement),
        )
        logger.info("MySQL is ready", host=options.host, port=options.port)

    return check
