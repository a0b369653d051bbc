"""MySQL server containers for tests."""

from typing import Optional

import docker
import structlog

from ...config import settings
from ...models.container import PortBinding
from ...models.errors import ContainerNotCreatedError
from ...models.mysql import MySQLOptions
from ...utils.environment import is_inside_container
from ..container.container import DockerContainer
from ..container.options import (
    Option,
    docker_env,
    expose_ports,
    health_checker,
    host_port_bindings,
    image_repository,
    image_tag,
)
from .database import drop_mysql_database
from .health import new_mysql_health_checker, update_mysql_container_host
from .options import to_mysql_connection_string

logger = structlog.get_logger(__name__)


class MySQLContainer:
    """A MySQL server for a test run.

    Wraps a ``DockerContainer`` running the server. When the server is provided
    externally (TEST_MYSQL_HOST) there is no container and only the
    connection details are kept.
    """

    def __init__(
        self,
        options: MySQLOptions,
        docker_container: Optional[DockerContainer] = None,
        url: str = "",
    ):
        self.docker_container = docker_container
        self.mysql_options = options
        self.started = False
        self.url = url

    @property
    def managed(self) -> bool:
        """Whether this object owns a server container."""
        return self.docker_container is not None

    def _require_container(self, operation: str) -> DockerContainer:
        if self.docker_container is None:
            raise ContainerNotCreatedError(f"{operation} an external mysql server")
        return self.docker_container

    def start(self) -> None:
        """Start the server and refresh the connection string.

        The connection string depends on where the server ended up, so it is
        only final after this call.
        """
        container = self._require_container("start")
        self.started = True
        container.start()

        update_mysql_container_host(container, self.mysql_options)
        self.url = to_mysql_connection_string(self.mysql_options)
        logger.info("MySQL container started", host=self.mysql_options.host, port=self.mysql_options.port)

    def suspend(self) -> None:
        self._require_container("suspend").suspend()

    def stop(self) -> None:
        container = self._require_container("stop")
        self.started = False
        container.stop()

    def teardown(self) -> None:
        """Release what the test run used.

        Removes the server container when one was started; otherwise drops
        the test database on the external server.
        """
        if self.docker_container is not None and self.started:
            self.started = False
            self.docker_container.stop()
            return

        drop_mysql_database(self.url, self.mysql_options.database)

    def __enter__(self) -> "MySQLContainer":
        if self.managed and not self.started:
            try:
                self.start()
            except BaseException:
                self.teardown()
                raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.teardown()

    def __repr__(self) -> str:
        return (
            f"MySQLContainer(host={self.mysql_options.host!r}, port={self.mysql_options.port!r}, "
            f"database={self.mysql_options.database!r}, started={self.started})"
        )


def new_mysql_container(
    options: MySQLOptions,
    *container_options: Option,
    client: Optional[docker.DockerClient] = None,
) -> MySQLContainer:
    """Create, but do not start, a MySQL server container.

    ``container_options`` are applied after the defaults and can override
    them, e.g. to pick a different image tag.
    """
    options = options.copy()
    mysql_settings = settings.mysql
    server_port = mysql_settings.container_port

    # The server always listens on its own port; outside a container it is
    # additionally published on options.port of the host.
    port_options = [expose_ports(server_port)]
    if not is_inside_container():
        port_options.append(host_port_bindings(PortBinding(f"{server_port}/tcp", options.port)))

    docker_container = DockerContainer(
        image_repository(mysql_settings.image),
        image_tag(mysql_settings.image_tag),
        docker_env(
            [
                f"MYSQL_ROOT_PASSWORD={options.password}",
                f"MYSQL_DATABASE={options.database}",
            ]
        ),
        health_checker(new_mysql_health_checker(options)),
        *port_options,
        *container_options,
        client=client,
    )

    # Recomputed on start, once the container address is known
    return MySQLContainer(
        options=options,
        docker_container=docker_container,
        url=to_mysql_connection_string(options),
    )
