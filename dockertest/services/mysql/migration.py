"""Running schema migrations from a migration image."""

import structlog
from docker.errors import DockerException

from ...config import settings
from ...models.errors import ContainerNotCreatedError, MigrationError
from ...models.mysql import MigrationOptions
from ..container.container import DockerContainer
from ..container.options import docker_env, image_repository, image_tag, run_options
from .container import MySQLContainer

logger = structlog.get_logger(__name__)


def run_migration_container(mysql: MySQLContainer, options: MigrationOptions) -> None:
    """Run the migration image against a started MySQL container.

    The migration container connects to the server over the docker bridge
    network, so it gets the server's container address and port rather than
    the published ones. It is removed once it exits.

    Raises:
        MigrationError: the migrations exited with a non-zero status.
    """
    if mysql.docker_container is None:
        raise ContainerNotCreatedError("run migrations without a mysql container")

    host = mysql.docker_container.ip_address()
    port = settings.mysql.container_port
    mysql_options = mysql.mysql_options

    container = DockerContainer(
        image_repository(options.image_repository),
        image_tag(options.resolved_tag()),
        docker_env(
            [
                "RAILS_ENV=customized",
                f"HOST={host}",
                f"PORT={port}",
                f"DATABASE={mysql_options.database}",
                f"USERNAME={mysql_options.username}",
                f"PASSWORD={mysql_options.password}",
            ]
        ),
        run_options(options.resolved_command()),
        client=mysql.docker_container.docker_client,
    )

    try:
        try:
            container.start()
        except DockerException as e:
            logger.error("Failed to start container", image=container.spec.image, err=str(e))
            raise

        try:
            exit_code = container.wait()
        except DockerException as e:
            logger.error("Failed to wait container", image=container.spec.image, err=str(e))
            raise

        if exit_code != 0:
            output = container.logs()
            logger.error(
                "Migration failed",
                image=container.spec.image,
                exit_code=exit_code,
            )
            raise MigrationError(image=container.spec.image, exit_code=exit_code, output=output)

        logger.info("Migration finished", image=container.spec.image)
    finally:
        container.stop()
