"""Loading MySQL options and building connection strings."""

import os

from sqlalchemy.engine import URL

from ...config import settings
from ...models.mysql import MySQLOptions
from ...utils.environment import is_inside_container

DEFAULT_MYSQL_OPTIONS = MySQLOptions()

# Environment variables overriding the defaults, by option field
ENV_OVERRIDES = {
    "host": "TEST_MYSQL_HOST",
    "port": "TEST_MYSQL_PORT",
    "database": "TEST_MYSQL_DATABASE",
    "username": "TEST_MYSQL_USERNAME",
    "password": "TEST_MYSQL_PASSWORD",
}


def load_mysql_options() -> MySQLOptions:
    """Build the options for the current environment.

    Starts from ``DEFAULT_MYSQL_OPTIONS``. Inside a container the server is
    reached on its own port rather than the published one. ``TEST_MYSQL_*``
    variables override individual fields whenever they are set, even to an
    empty string.
    """
    options = DEFAULT_MYSQL_OPTIONS.copy()

    if is_inside_container():
        options.port = settings.mysql.container_port

    for field_name, env_var in ENV_OVERRIDES.items():
        if env_var in os.environ:
            setattr(options, field_name, os.environ[env_var])

    return options


def to_mysql_connection_string(options: MySQLOptions) -> str:
    """Render the options as a SQLAlchemy connection URL.

    An empty database gives a server-level URL with no schema selected.

    Raises:
        ValueError: if the port is not a number.
    """
    try:
        port = int(options.port)
    except ValueError:
        raise ValueError(f"invalid mysql port {options.port!r}") from None

    url = URL.create(
        drivername=settings.mysql.driver,
        username=options.username,
        password=options.password,
        host=options.host,
        port=port,
        database=options.database or None,
    )
    return url.render_as_string(hide_password=False)
