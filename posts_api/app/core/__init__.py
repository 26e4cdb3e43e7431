"""Core infrastructure: configuration, logging, database access and errors."""
