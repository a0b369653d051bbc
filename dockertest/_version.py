"""Version information for dockertest."""

__version__ = "0.3.0"
