"""Statements run against the MySQL server."""

import structlog
from sqlalchemy import create_engine, text
from sqlalchemy.pool import NullPool

from ...models.mysql import MySQLOptions
from .options import to_mysql_connection_string

logger = structlog.get_logger(__name__)


def quote_identifier(name: str) -> str:
    """Quote a schema name for use in MySQL DDL."""
    return "`" + name.replace("`", "``") + "`"


def execute_statement(url: str, statement: str) -> None:
    """Open a connection to ``url``, run one statement and close it again."""
    engine = create_engine(url, poolclass=NullPool)
    try:
        with engine.begin() as conn:
            conn.execute(text(statement))
    finally:
        engine.dispose()


def create_database_statement(database: str) -> str:
    return f"CREATE DATABASE IF NOT EXISTS {quote_identifier(database)}"


def drop_database_statement(database: str) -> str:
    return f"DROP DATABASE IF EXISTS {quote_identifier(database)}"


def create_mysql_database(options: MySQLOptions) -> None:
    """Create the configured database if it does not exist yet.

    Connects without a schema selected, since the schema may be missing.
    """
    url = to_mysql_connection_string(options.copy(database=""))
    execute_statement(url, create_database_statement(options.database))
    logger.info("Ensured test database exists", database=options.database, host=options.host)


def drop_mysql_database(url: str, database: str) -> None:
    execute_statement(url, drop_database_statement(database))
    logger.info("Dropped test database", database=database)
