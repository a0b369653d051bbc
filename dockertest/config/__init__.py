"""Configuration management for dockertest.

Settings are read from the environment (and an optional ``.env`` file) and
organized into logical groups.

Usage:
    from dockertest.config import settings

    # Access grouped settings
    settings.docker.socket_url
    settings.mysql.image

    # Or the flat fields
    settings.docker_timeout
    settings.test_mysql_image_tag
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .docker import DockerConfig
from .logging import LoggingConfig
from .mysql import MySQLConfig


class Settings(BaseSettings):
    """Settings with environment variable support.

    Fields are flat so that every one of them maps onto a single environment
    variable; the ``docker``, ``mysql`` and ``logging`` properties give grouped
    access.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Docker Configuration
    docker_base_url: str | None = Field(
        default=None,
        description="Explicit engine URL; overrides DOCKER_MACHINE_NAME detection",
    )
    docker_socket_url: str = Field(default="unix:///var/run/docker.sock")
    docker_timeout: int = Field(default=60, ge=1)
    docker_pull_images: bool = Field(
        default=True,
        description="Pull images that are missing locally before creating a container",
    )
    docker_bind_host_ip: str = Field(default="0.0.0.0")
    container_label_prefix: str = Field(default="io.dockertest")

    # MySQL Configuration
    test_mysql_image: str = Field(default="mysql")
    test_mysql_image_tag: str = Field(default="5.7")
    test_mysql_driver: str = Field(
        default="mysql+mysqlconnector",
        description="SQLAlchemy dialect+driver used in connection strings",
    )
    test_mysql_container_port: str = Field(default="3306")
    test_mysql_ready_attempts: int = Field(default=10, ge=1, le=1000)
    test_mysql_ready_delay: float = Field(default=3.0, ge=0)

    # Logging Configuration
    # DOCKERTEST_LOG_*; plain LOG_* belongs to the project under test
    dockertest_log_level: str = Field(default="INFO")
    dockertest_log_format: str = Field(default="console")

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @field_validator("test_mysql_container_port")
    @classmethod
    def validate_container_port(cls, v):
        """Ensure the container port is a plain port number."""
        if not v.isdigit() or not 1 <= int(v) <= 65535:
            raise ValueError("MySQL container port must be a number between 1 and 65535")
        return v

    @field_validator("dockertest_log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is one the logging module knows."""
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}")
        return v.upper()

    @field_validator("dockertest_log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Only console and json rendering are supported."""
        if v.lower() not in ("console", "json"):
            raise ValueError("Log format must be 'console' or 'json'")
        return v.lower()

    # ========================================================================
    # GROUPED CONFIG ACCESS
    # ========================================================================

    @property
    def docker(self) -> DockerConfig:
        """Access Docker configuration group."""
        return DockerConfig(
            docker_base_url=self.docker_base_url,
            docker_socket_url=self.docker_socket_url,
            docker_timeout=self.docker_timeout,
            docker_pull_images=self.docker_pull_images,
            docker_bind_host_ip=self.docker_bind_host_ip,
            container_label_prefix=self.container_label_prefix,
        )

    @property
    def mysql(self) -> MySQLConfig:
        """Access MySQL configuration group."""
        return MySQLConfig(
            test_mysql_image=self.test_mysql_image,
            test_mysql_image_tag=self.test_mysql_image_tag,
            test_mysql_driver=self.test_mysql_driver,
            test_mysql_container_port=self.test_mysql_container_port,
            test_mysql_ready_attempts=self.test_mysql_ready_attempts,
            test_mysql_ready_delay=self.test_mysql_ready_delay,
        )

    @property
    def logging(self) -> LoggingConfig:
        """Access logging configuration group."""
        return LoggingConfig(
            dockertest_log_level=self.dockertest_log_level,
            dockertest_log_format=self.dockertest_log_format,
        )


# Global settings instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "DockerConfig",
    "MySQLConfig",
    "LoggingConfig",
]
