"""Error types and exception classes for dockertest."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(str, Enum):
    """Error type enumeration."""

    DOCKER_UNAVAILABLE = "docker_unavailable"
    CONTAINER_CREATION = "container_creation"
    CONTAINER_STATE = "container_state"
    STARTUP = "startup"
    MIGRATION = "migration"
    DATABASE = "database"
    INTERNAL = "internal"


class DockerTestError(Exception):
    """Base exception for dockertest."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INTERNAL,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Structured form of the error, suitable for log event fields."""
        return {
            "error": self.message,
            "error_type": self.error_type.value,
            **self.details,
        }


class DockerUnavailableError(DockerTestError):
    """The Docker engine could not be reached."""

    def __init__(self, message: str = "Docker engine is not available", **kwargs):
        super().__init__(
            message=message, error_type=ErrorType.DOCKER_UNAVAILABLE, **kwargs
        )


class ContainerCreationError(DockerTestError):
    """A container could not be created.

    Raised from the container constructor; a test run cannot go on without
    the container so callers are not expected to recover from it.
    """

    def __init__(self, image: str, reason: str, **kwargs):
        self.image = image
        super().__init__(
            message=f"Failed to create a container {image} error:{reason}",
            error_type=ErrorType.CONTAINER_CREATION,
            **kwargs,
        )


class ContainerNotCreatedError(DockerTestError):
    """A lifecycle call was made on a container that was never created or was already removed."""

    def __init__(self, operation: str, **kwargs):
        super().__init__(
            message=f"Cannot {operation}: container has not been created or was removed",
            error_type=ErrorType.CONTAINER_STATE,
            **kwargs,
        )


class MigrationError(DockerTestError):
    """The migration container exited unsuccessfully."""

    def __init__(self, image: str, exit_code: int, output: str = "", **kwargs):
        self.image = image
        self.exit_code = exit_code
        self.output = output
        super().__init__(
            message=f"Migration container {image} exited with status {exit_code}",
            error_type=ErrorType.MIGRATION,
            **kwargs,
        )


class DatabaseError(DockerTestError):
    """Preparing or dropping the test database failed."""

    def __init__(self, message: str = "Database operation failed", **kwargs):
        super().__init__(message=message, error_type=ErrorType.DATABASE, **kwargs)


class MySQLStartError(DockerTestError):
    """Starting a MySQL container failed.

    Carries the container so the caller can still tear it down.
    """

    def __init__(self, container: Any, cause: BaseException, **kwargs):
        self.container = container
        self.cause = cause
        super().__init__(
            message=f"Failed to start mysql container: {cause}",
            error_type=ErrorType.STARTUP,
            **kwargs,
        )
