"""Utility modules for dockertest."""

from .environment import is_inside_container
from .error_handlers import handle_docker_error
from .id_generator import generate_name_suffix
from .logging import setup_logging
from .retry import retry

__all__ = [
    "setup_logging",
    "is_inside_container",
    "handle_docker_error",
    "generate_name_suffix",
    "retry",
]
