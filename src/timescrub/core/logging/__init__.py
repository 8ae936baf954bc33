"""Logging module with structured logging and request tracking."""

from timescrub.core.logging.middleware import RequestLoggingMiddleware


__all__ = [
    "RequestLoggingMiddleware",
]

