"""Docker client factory.

Provides one engine client per process. When ``DOCKER_MACHINE_NAME`` is set
(docker-machine, docker toolbox) the client is configured from the
``DOCKER_*`` environment variables; otherwise the local unix socket is used.
"""

import os

import docker
import structlog
from docker.errors import DockerException

from ...config import settings
from ...utils.error_handlers import handle_docker_error

logger = structlog.get_logger(__name__)

# Global client instance
_client: docker.DockerClient | None = None


def _create_client() -> docker.DockerClient:
    docker_settings = settings.docker

    if docker_settings.base_url:
        logger.info("Connecting to Docker engine", base_url=docker_settings.base_url)
        return docker.DockerClient(
            base_url=docker_settings.base_url, timeout=docker_settings.timeout
        )

    if os.getenv("DOCKER_MACHINE_NAME"):
        logger.info(
            "Connecting to Docker engine from environment",
            machine=os.getenv("DOCKER_MACHINE_NAME"),
        )
        return docker.from_env(timeout=docker_settings.timeout)

    logger.info("Connecting to Docker engine", base_url=docker_settings.socket_url)
    return docker.DockerClient(
        base_url=docker_settings.socket_url, timeout=docker_settings.timeout
    )


def new_docker_client() -> docker.DockerClient:
    """Get the Docker client, creating it on first use.

    Raises:
        DockerUnavailableError: if the client cannot be configured.
    """
    global _client

    if _client is not None:
        return _client

    try:
        _client = _create_client()
    except DockerException as e:
        raise handle_docker_error(e, operation="client initialization") from e

    return _client


def is_available() -> bool:
    """Check whether the Docker engine answers a ping."""
    try:
        return bool(new_docker_client().ping())
    except Exception as e:
        logger.debug("Docker engine not reachable", error=str(e))
        return False


def close_docker_client() -> None:
    """Close the cached Docker client."""
    global _client

    if _client is None:
        return
    try:
        _client.close()
    except Exception as e:
        logger.error(f"Error closing Docker client: {e}")
    finally:
        _client = None
