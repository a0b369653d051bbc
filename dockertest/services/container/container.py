"""Lifecycle of a single test container."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

import docker
import structlog
from docker.errors import DockerException, ImageNotFound
from docker.models.containers import Container

from ...config import settings
from ...models.container import ContainerCallback, ContainerSpec
from ...models.errors import ContainerNotCreatedError
from ...utils.error_handlers import handle_docker_error
from ...utils.id_generator import generate_name_suffix
from .client import new_docker_client
from .options import Option

logger = structlog.get_logger(__name__)


class DockerContainer:
    """A disposable container created from a list of options.

    The container is created, but not started, by the constructor. Failing to
    create it raises ``ContainerCreationError``: a test that needs the
    container cannot run without it.

    Lifecycle::

        container = DockerContainer(image_repository("redis"), image_tag("7"))
        container.start()     # start, health check, initializer
        container.suspend()   # stop immediately, keep the container
        container.wait()      # block until it exits
        container.stop()      # force remove
    """

    def __init__(self, *options: Option, client: Optional[docker.DockerClient] = None):
        self.spec = ContainerSpec()
        for option in options:
            option(self.spec)

        self.docker_client = client if client is not None else new_docker_client()
        self.container: Optional[Container] = None
        self._create()

    @property
    def id(self) -> Optional[str]:
        return self.container.id if self.container is not None else None

    @property
    def name(self) -> Optional[str]:
        return self.container.name if self.container is not None else None

    def _labels(self) -> Dict[str, str]:
        prefix = settings.docker.container_label_prefix
        labels = {
            f"{prefix}.managed": "true",
            f"{prefix}.created-at": datetime.now(timezone.utc).isoformat(),
        }
        labels.update(self.spec.labels)
        return labels

    def _pull_image_if_needed(self) -> None:
        try:
            self.docker_client.images.get(self.spec.image)
        except ImageNotFound:
            logger.info("Pulling Docker image", image=self.spec.image)
            self.docker_client.images.pull(
                self.spec.image_repository, tag=self.spec.image_tag
            )
            logger.info("Pulled Docker image", image=self.spec.image)

    def _create(self) -> None:
        spec = self.spec
        docker_settings = settings.docker
        container_name = spec.name + generate_name_suffix()

        try:
            if docker_settings.pull_images:
                self._pull_image_if_needed()

            self.container = self.docker_client.containers.create(
                image=spec.image,
                name=container_name,
                command=spec.run_args or None,
                environment=spec.env or None,
                ports=spec.published_ports(docker_settings.bind_host_ip),
                labels=self._labels(),
            )
        except DockerException as e:
            logger.error(
                "Failed to create container",
                image=spec.image,
                name=container_name,
                error=str(e),
            )
            raise handle_docker_error(e, operation="create", image=spec.image) from e

        logger.info(
            "Created container",
            container_id=self.container.id[:12],
            name=container_name,
            image=spec.image,
        )

    def _require_container(self, operation: str) -> Container:
        if self.container is None:
            raise ContainerNotCreatedError(operation)
        return self.container

    def on_ready(self, initializer: ContainerCallback) -> None:
        """Register a callback run after the container passed its health check."""
        self.spec.initializer = initializer

    def start(self) -> None:
        """Start the container and block until it is ready.

        Runs the health checker, then the initializer. Errors from the
        engine and from either callback propagate.
        """
        container = self._require_container("start")
        container.start()
        logger.info("Started container", container_id=container.id[:12], image=self.spec.image)

        self.spec.health_checker(self)

        if self.spec.initializer is not None:
            self.spec.initializer(self)

    def suspend(self) -> None:
        """Stop the container without waiting for a graceful shutdown."""
        container = self._require_container("suspend")
        container.stop(timeout=0)
        logger.info("Suspended container", container_id=container.id[:12])

    def wait(self) -> int:
        """Block until the container exits and return its exit status."""
        container = self._require_container("wait")
        result = container.wait()
        exit_code = result.get("StatusCode", 0)
        logger.debug("Container exited", container_id=container.id[:12], exit_code=exit_code)
        return exit_code

    def stop(self) -> None:
        """Force-remove the container.

        Once removed the container is gone; calling ``stop`` again does
        nothing and any other lifecycle call raises ``ContainerNotCreatedError``.
        """
        if self.container is None:
            return
        container = self.container
        container.remove(force=True)
        self.container = None
        logger.info("Removed container", container_id=container.id[:12])

    def inspect(self) -> Dict[str, Any]:
        """Reload the container state from the engine and return it."""
        container = self._require_container("inspect")
        container.reload()
        return container.attrs

    def ip_address(self) -> str:
        """IP address of the container on the docker bridge network."""
        network_settings = self.inspect().get("NetworkSettings", {})
        address = network_settings.get("IPAddress")
        if address:
            return address

        # Containers attached only to user-defined networks have no top-level address
        for network in (network_settings.get("Networks") or {}).values():
            if network.get("IPAddress"):
                return network["IPAddress"]
        return ""

    def logs(self) -> str:
        """Combined stdout and stderr of the container."""
        container = self._require_container("read logs of")
        output = container.logs(stdout=True, stderr=True)
        return output.decode("utf-8", errors="replace")

    def __enter__(self) -> "DockerContainer":
        try:
            self.start()
        except BaseException:
            self.stop()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"DockerContainer(image={self.spec.image!r}, id={self.id!r})"
