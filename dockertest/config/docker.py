"""Docker configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class DockerConfig(BaseSettings):
    """Docker engine connection settings."""

    base_url: str | None = Field(default=None, alias="docker_base_url")
    socket_url: str = Field(
        default="unix:///var/run/docker.sock", alias="docker_socket_url"
    )
    timeout: int = Field(default=60, ge=1, alias="docker_timeout")
    pull_images: bool = Field(default=True, alias="docker_pull_images")

    # Host address published container ports are bound to
    bind_host_ip: str = Field(default="0.0.0.0", alias="docker_bind_host_ip")

    # Container labeling so leftovers can be found after a crashed run
    container_label_prefix: str = Field(default="io.dockertest")

    class Config:
        env_prefix = ""
        extra = "ignore"
