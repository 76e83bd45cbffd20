"""Shared helpers: message formatting and the colored log formatter."""
