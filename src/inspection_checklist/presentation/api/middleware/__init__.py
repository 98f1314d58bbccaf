"""Middleware module for the inspection checklist API."""

from .logging import RequestResponseLoggingMiddleware, CORRELATION_HEADER

__all__ = [
    "RequestResponseLoggingMiddleware",
    "CORRELATION_HEADER"
]
