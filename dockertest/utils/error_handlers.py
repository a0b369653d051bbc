"""Translation of Docker SDK errors into dockertest exceptions."""

from typing import Optional

from docker.errors import APIError, DockerException, ImageNotFound

from ..models.errors import (
    ContainerCreationError,
    DockerTestError,
    DockerUnavailableError,
)


def handle_docker_error(
    error: Exception, operation: str = "container operation", image: Optional[str] = None
) -> DockerTestError:
    """Convert Docker errors to the matching dockertest exception.

    Only used where the caller adds context (which image, which operation);
    other engine errors are passed through to the test untouched.
    """
    if isinstance(error, DockerTestError):
        return error

    if operation == "create" and image is not None:
        if isinstance(error, ImageNotFound):
            reason = f"image not found: {error.explanation or error}"
        elif isinstance(error, APIError):
            reason = f"Docker API error: {error.explanation or error}"
        else:
            reason = str(error)
        return ContainerCreationError(image=image, reason=reason)

    if isinstance(error, APIError):
        return DockerUnavailableError(
            message=f"Docker API error during {operation}: {error.explanation or error}"
        )
    if isinstance(error, DockerException):
        return DockerUnavailableError(
            message=f"Docker service error during {operation}: {error}"
        )
    return DockerUnavailableError(
        message=f"Unknown Docker error during {operation}: {error}"
    )
