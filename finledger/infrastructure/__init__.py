"""Infrastructure adapters for storage, configuration and logging."""
