"""Infrastructure layer: persistence adapters, database and logging."""
