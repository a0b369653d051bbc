"""Unit tests for Docker error translation."""

from docker.errors import APIError, DockerException, ImageNotFound

from dockertest.models.errors import (
    ContainerCreationError,
    DockerUnavailableError,
    ErrorType,
    MigrationError,
)
from dockertest.utils.error_handlers import handle_docker_error


class TestHandleDockerError:
    """Tests for handle_docker_error."""

    def test_create_image_not_found(self):
        error = handle_docker_error(
            ImageNotFound("not found", explanation="No such image: mysql:9.9"),
            operation="create",
            image="mysql:9.9",
        )

        assert isinstance(error, ContainerCreationError)
        assert error.image == "mysql:9.9"
        assert "No such image" in error.message
        assert error.error_type == ErrorType.CONTAINER_CREATION

    def test_create_api_error(self):
        error = handle_docker_error(
            APIError("conflict", explanation="name already in use"),
            operation="create",
            image="mysql:5.7",
        )

        assert isinstance(error, ContainerCreationError)
        assert "Docker API error: name already in use" in error.message

    def test_create_without_image(self):
        error = handle_docker_error(APIError("boom", explanation="daemon busy"), operation="create", image=None)

        assert isinstance(error, DockerUnavailableError)
        assert error.message == "Docker API error during create: daemon busy"

    def test_api_error(self):
        error = handle_docker_error(APIError("boom", explanation="daemon busy"), operation="ping")

        assert isinstance(error, DockerUnavailableError)
        assert "Docker API error during ping: daemon busy" == error.message

    def test_docker_exception(self):
        error = handle_docker_error(DockerException("socket missing"), operation="client initialization")

        assert isinstance(error, DockerUnavailableError)
        assert "socket missing" in error.message

    def test_unknown_error(self):
        error = handle_docker_error(OSError("permission denied"))

        assert isinstance(error, DockerUnavailableError)
        assert "Unknown Docker error during container operation" in error.message

    def test_own_errors_pass_through(self):
        original = MigrationError(image="migrate:latest", exit_code=2)
        assert handle_docker_error(original) is original


class TestErrorModels:
    """Tests for the exception classes themselves."""

    def test_to_dict(self):
        error = MigrationError(image="migrate:latest", exit_code=2, details={"container": "abc"})

        assert error.to_dict() == {
            "error": "Migration container migrate:latest exited with status 2",
            "error_type": "migration",
            "container": "abc",
        }
