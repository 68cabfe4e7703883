"""
Middleware modules for the Marketplace API
"""

from .request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
