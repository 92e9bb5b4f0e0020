"""A composable rule engine that evaluates and applies prioritised rules to a context."""

__version__ = "0.1.1"

__all__ = ["builder", "demo", "engine", "errors", "traits", "utils"]