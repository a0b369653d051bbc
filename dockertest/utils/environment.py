"""Detection of the environment the tests run in."""

import os

# Marker files created by docker and by our CI images respectively
CONTAINER_MARKER_FILES = ("/.dockerenv", "/bin/running-in-container")


def is_inside_container() -> bool:
    """Return True when the current process runs inside a container."""
    return any(os.path.exists(path) for path in CONTAINER_MARKER_FILES)
