"""Infrastructure layer - configuration, logging, database access."""
