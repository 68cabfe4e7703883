"""
API module initialization
"""

from . import categories, health, home, products, users

__all__ = ["categories", "health", "home", "products", "users"]
