"""Option builders for ``DockerContainer``.

Each builder returns a callable that sets one aspect of a ``ContainerSpec``.
Options are applied in order, so later options override earlier ones::

    DockerContainer(
        image_repository("redis"),
        image_tag("7"),
        expose_ports("6379"),
    )
"""

from typing import Callable, Dict, Iterable

from ...models.container import ContainerCallback, ContainerSpec, PortBinding, normalize_port

Option = Callable[[ContainerSpec], None]


def container_name(name: str) -> Option:
    """Name prefix; a unique suffix is appended when the container is created."""

    def apply(spec: ContainerSpec) -> None:
        spec.name = name

    return apply


def image_repository(repository: str) -> Option:
    def apply(spec: ContainerSpec) -> None:
        spec.image_repository = repository

    return apply


def image_tag(tag: str) -> Option:
    def apply(spec: ContainerSpec) -> None:
        spec.image_tag = tag

    return apply


def docker_env(env: Iterable[str]) -> Option:
    """Environment as ``KEY=value`` strings. Replaces any earlier env."""

    def apply(spec: ContainerSpec) -> None:
        spec.env = list(env)

    return apply


def run_options(args: Iterable[str]) -> Option:
    """Command to run in the container."""

    def apply(spec: ContainerSpec) -> None:
        spec.run_args = list(args)

    return apply


def expose_ports(*ports: str) -> Option:
    """Expose container ports, published on the same port of the host."""

    def apply(spec: ContainerSpec) -> None:
        spec.ports.extend(str(p) for p in ports)

    return apply


def host_port_bindings(*bindings: PortBinding) -> Option:
    """Publish exposed container ports on different host ports."""

    def apply(spec: ContainerSpec) -> None:
        for binding in bindings:
            container_port, host_port = binding
            spec.port_bindings[normalize_port(container_port)] = str(host_port)

    return apply


def labels(values: Dict[str, str]) -> Option:
    def apply(spec: ContainerSpec) -> None:
        spec.labels.update(values)

    return apply


def health_checker(checker: ContainerCallback) -> Option:
    """Callback that blocks until the started container is ready."""

    def apply(spec: ContainerSpec) -> None:
        spec.health_checker = checker

    return apply


def initializer(callback: ContainerCallback) -> Option:
    """Callback run once the container passed its health check."""

    def apply(spec: ContainerSpec) -> None:
        spec.initializer = callback

    return apply
