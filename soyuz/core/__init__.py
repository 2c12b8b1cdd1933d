"""Core infrastructure: configuration, logging, exceptions and paths."""
