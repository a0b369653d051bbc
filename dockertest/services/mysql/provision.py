"""One-call MySQL setup for test suites."""

import os

import structlog
from sqlalchemy.exc import SQLAlchemyError

from ...models.errors import DatabaseError, MySQLStartError
from .container import MySQLContainer, new_mysql_container
from .database import create_mysql_database
from .options import load_mysql_options, to_mysql_connection_string

logger = structlog.get_logger(__name__)


def setup_mysql() -> MySQLContainer:
    """Provide a MySQL database for the current test run.

    If TEST_MYSQL_HOST is set that server is used directly and only the test
    database is created on it. Otherwise a MySQL container is started.

    Raises:
        DatabaseError: the options do not form a connection string, or the
            external server could not be prepared.
        MySQLStartError: the container was created but did not start; it is
            available as ``error.container`` for teardown.
    """
    options = load_mysql_options()

    # TEST_MYSQL_PORT may be set to anything, including an empty string
    try:
        url = to_mysql_connection_string(options)
    except ValueError as e:
        raise DatabaseError(f"Failed to create mysql connection string: {e}") from e

    if "TEST_MYSQL_HOST" in os.environ:
        try:
            create_mysql_database(options)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to create mysql database: {e}") from e

        logger.info("Using external MySQL server", host=options.host, port=options.port)
        return MySQLContainer(options=options, url=url)

    container = new_mysql_container(options)
    try:
        container.start()
    except Exception as e:
        logger.error("Failed to start mysql container", error=str(e))
        raise MySQLStartError(container, e) from e

    return container
