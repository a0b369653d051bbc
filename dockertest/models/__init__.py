"""Data models for dockertest."""

from .container import ContainerCallback, ContainerSpec, PortBinding, normalize_port
from .errors import (
    ContainerCreationError,
    ContainerNotCreatedError,
    DatabaseError,
    DockerTestError,
    DockerUnavailableError,
    ErrorType,
    MigrationError,
    MySQLStartError,
)
from .mysql import DEFAULT_MIGRATION_COMMAND, MigrationOptions, MySQLOptions

__all__ = [
    # Containers
    "ContainerCallback",
    "ContainerSpec",
    "PortBinding",
    "normalize_port",
    # MySQL
    "MySQLOptions",
    "MigrationOptions",
    "DEFAULT_MIGRATION_COMMAND",
    # Errors
    "ErrorType",
    "DockerTestError",
    "DockerUnavailableError",
    "ContainerCreationError",
    "ContainerNotCreatedError",
    "MigrationError",
    "DatabaseError",
    "MySQLStartError",
]
