"""Commands (state-changing requests) and their handlers."""
