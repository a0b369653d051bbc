"""Container management services.

This package provides Docker container management split into:
- client.py: Docker client creation
- options.py: option builders describing a container
- container.py: container lifecycle (create, start, suspend, wait, stop)
"""

from .client import close_docker_client, is_available, new_docker_client
from .container import DockerContainer
from .options import (
    Option,
    container_name,
    docker_env,
    expose_ports,
    health_checker,
    host_port_bindings,
    image_repository,
    image_tag,
    initializer,
    labels,
    run_options,
)

__all__ = [
    "DockerContainer",
    "new_docker_client",
    "close_docker_client",
    "is_available",
    "Option",
    "container_name",
    "image_repository",
    "image_tag",
    "docker_env",
    "run_options",
    "expose_ports",
    "host_port_bindings",
    "labels",
    "health_checker",
    "initializer",
]
