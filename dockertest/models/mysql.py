"""Data models for MySQL test servers."""

from dataclasses import dataclass, field, replace
from typing import List

DEFAULT_MIGRATION_COMMAND = ["bundle", "exec", "rake", "db:migrate"]


@dataclass
class MySQLOptions:
    """Connection options for the MySQL server under test.

    ``username``, ``password``, ``port`` and ``database`` configure both the
    connection string and the server container. ``host`` is only used for the
    connection string.
    """

    username: str = "root"
    password: str = "my-secret-pw"

    # Published on the docker host. From inside another container the server
    # is reached on 3306 instead.
    port: str = "3307"

    database: str = "db0"

    # On the host the server is reached through the published port on
    # 127.0.0.1; inside a container the container IP is used.
    host: str = "127.0.0.1"

    def copy(self, **changes) -> "MySQLOptions":
        return replace(self, **changes)


@dataclass
class MigrationOptions:
    """Options for the migration container."""

    image_repository: str
    image_tag: str = ""

    # Overrides the default command "bundle exec rake db:migrate"
    command: List[str] = field(default_factory=list)

    def resolved_command(self) -> List[str]:
        return list(self.command) if self.command else list(DEFAULT_MIGRATION_COMMAND)

    def resolved_tag(self) -> str:
        return self.image_tag or "latest"
