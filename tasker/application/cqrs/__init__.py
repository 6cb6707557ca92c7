"""CQRS runtime: request types, registry, pipeline and dispatcher."""
