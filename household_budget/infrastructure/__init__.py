"""Infrastructure package: store adapters, settings, and logging."""
