"""ID generation utilities for container names."""

import uuid


def generate_name_suffix() -> str:
    """Generate a suffix that makes container names unique across runs."""
    return str(uuid.uuid4())
