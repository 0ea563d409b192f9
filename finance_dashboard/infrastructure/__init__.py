"""Infrastructure adapters: persistence, configuration and logging."""
