"""Git domain model: errors, input checks, value objects, events, projections and queries."""

__version__ = "0.3.0"

__all__ = ["errors", "security", "value_objects", "events", "projections", "queries"]