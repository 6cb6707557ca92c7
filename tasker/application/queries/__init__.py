"""Queries (read-only requests) and their handlers."""
