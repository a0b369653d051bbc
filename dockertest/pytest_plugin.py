"""pytest fixtures providing a MySQL database.

Registered through the ``pytest11`` entry point, so installing the package is
enough::

    def test_users_table(mysql):
        engine = create_engine(mysql.url)
        ...

Nothing is configured until a fixture is requested: test suites that never
use them run exactly as without the package.
"""

import pytest
import structlog

from .models.errors import MySQLStartError
from .models.mysql import MySQLOptions
from .services.mysql.provision import setup_mysql
from .utils.logging import setup_logging


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: test needs a reachable Docker engine or MySQL server"
    )


@pytest.fixture(scope="session")
def mysql():
    """A ready MySQL database, torn down at the end of the session."""
    if not structlog.is_configured():
        setup_logging()

    try:
        container = setup_mysql()
    except MySQLStartError as e:
        e.container.teardown()
        raise

    yield container

    container.teardown()


@pytest.fixture(scope="session")
def mysql_options(mysql) -> MySQLOptions:
    """Connection options of the ``mysql`` database, host as seen from the tests."""
    return mysql.mysql_options
