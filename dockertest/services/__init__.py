"""Services for managing test containers."""
