"""
RessourcesMG API Middleware Package
===================================

FastAPI middleware for cross-cutting concerns.
"""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
