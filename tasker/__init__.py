"""Tasker application core.

Request dispatch (commands, queries, validation pipeline), the auth token
lifecycle and the task use-cases built on top of them.
"""

__version__ = "0.1.0"
