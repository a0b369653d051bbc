"""Data models for managed containers.

These describe how a test container is created; the live engine handle is
kept by ``DockerContainer`` itself.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, NamedTuple, Optional

if TYPE_CHECKING:
    from ..services.container.container import DockerContainer

# Lifecycle hook run against a started container (health checks, initializers)
ContainerCallback = Callable[["DockerContainer"], None]


def normalize_port(port: str | int) -> str:
    """Return a port key in engine form, e.g. ``3306`` -> ``3306/tcp``."""
    port = str(port).strip()
    if "/" not in port:
        return f"{port}/tcp"
    return port


def _no_health_check(container: "DockerContainer") -> None:
    return None


class PortBinding(NamedTuple):
    """Publish ``container_port`` on ``host_port`` of the docker host."""

    container_port: str
    host_port: str


@dataclass
class ContainerSpec:
    """Everything needed to create a test container."""

    name: str = ""
    image_repository: str = ""
    image_tag: str = "latest"
    ports: List[str] = field(default_factory=list)
    port_bindings: Dict[str, str] = field(default_factory=dict)
    run_args: List[str] = field(default_factory=list)
    env: List[str] = field(default_factory=list)
    labels: Dict[str, str] = field(default_factory=dict)
    health_checker: ContainerCallback = _no_health_check
    initializer: Optional[ContainerCallback] = None

    @property
    def image(self) -> str:
        """Full image reference."""
        return f"{self.image_repository}:{self.image_tag}"

    def published_ports(self, host_ip: str = "0.0.0.0") -> Optional[Dict[str, tuple]]:
        """Port mapping in the form the Docker SDK expects.

        Every exposed port is published on the same host port unless a host
        port binding overrides it. Returns None when nothing is exposed.
        """
        if not self.ports:
            return None

        published = {}
        for port in self.ports:
            key = normalize_port(port)
            host_port = self.port_bindings.get(key, key.split("/", 1)[0])
            published[key] = (host_ip, int(host_port))
        return published
